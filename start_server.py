#!/usr/bin/env python3
"""Start script that reads HOST/PORT from the environment and launches uvicorn."""

import os
import sys
import subprocess

# Get PORT from environment, default to 8000
port = os.environ.get("PORT", "8000")
host = os.environ.get("HOST", "127.0.0.1")

# Ensure port is a valid integer
try:
    port_int = int(port)
except ValueError:
    print(f"Warning: Invalid PORT value '{port}', using default 8000", file=sys.stderr)
    port_int = 8000

# Set PYTHONPATH to include src directory
pythonpath = os.environ.get("PYTHONPATH", "")
src_path = os.path.abspath("src")
if not os.path.isdir(src_path):
    print(f"Warning: src directory not found at {src_path}", file=sys.stderr)
    src_path = os.getcwd()

if pythonpath:
    os.environ["PYTHONPATH"] = f"{src_path}{os.pathsep}{pythonpath}"
else:
    os.environ["PYTHONPATH"] = src_path
sys.path.insert(0, src_path)

# The store lives in process memory, so a single worker is required.
cmd = [
    sys.executable,
    "-m",
    "uvicorn",
    "container_dashboard.main:app",
    "--host",
    host,
    "--port",
    str(port_int),
]

print(f"Starting server on {host}:{port_int}...", file=sys.stderr)
print(f"PYTHONPATH={os.environ['PYTHONPATH']}", file=sys.stderr)

# Check if app module can be imported before starting
try:
    import container_dashboard.main  # noqa: F401
except ImportError as e:
    print(f"Failed to import container_dashboard.main: {e}", file=sys.stderr)
    import traceback
    traceback.print_exc(file=sys.stderr)
    sys.exit(1)

try:
    result = subprocess.call(cmd)
    if result != 0:
        print(f"Uvicorn exited with code {result}", file=sys.stderr)
    sys.exit(result)
except KeyboardInterrupt:
    print("Server interrupted by user", file=sys.stderr)
    sys.exit(0)
