#!/usr/bin/env python3
"""Diagnostic script to check that a running dashboard backend answers."""

import json
import sys
from urllib.parse import urljoin

import requests

DEFAULT_URL = "http://127.0.0.1:8000"


def check_endpoint(base_url, path, description):
    """GET an endpoint and print what came back. Returns (ok, status_code)."""
    url = urljoin(base_url, path)
    print(f"\n{'=' * 60}")
    print(f"Checking: {description}")
    print(f"URL: {url}")
    print(f"{'=' * 60}")

    try:
        response = requests.get(url, timeout=10)
    except requests.exceptions.Timeout:
        print("TIMEOUT: request took longer than 10 seconds")
        return False, None
    except requests.exceptions.ConnectionError as e:
        print(f"CONNECTION ERROR: {e}")
        return False, None

    print(f"Status Code: {response.status_code}")
    try:
        print(json.dumps(response.json(), indent=2, ensure_ascii=False))
    except ValueError:
        print(response.text[:500])
    return response.ok, response.status_code


def main():
    base_url = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_URL
    print(f"Target URL: {base_url}")

    checks = [
        ("/", "Root Endpoint"),
        ("/api/health", "Health Endpoint"),
        ("/api/health/store", "Store Contents"),
        ("/api/preferences/theme", "Theme Preference"),
    ]
    results = [(description, check_endpoint(base_url, path, description)) for path, description in checks]

    print(f"\n{'=' * 60}")
    print("SUMMARY")
    print(f"{'=' * 60}")
    for description, (ok, status_code) in results:
        print(f"{description:<20} {'OK' if ok else 'FAILED'} - Status: {status_code}")

    if not any(ok for _, (ok, _) in results):
        print("\nBackend is not accessible. Is start_server.py running?")
        sys.exit(1)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nCheck interrupted by user")
        sys.exit(1)
