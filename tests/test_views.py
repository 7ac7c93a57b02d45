import pytest

from container_dashboard.data.fixtures import seed_containers, seed_feedbacks, seed_warehouses
from container_dashboard.models.domain import Warehouse
from container_dashboard.services.dashboard import available_tabs, compute_dashboard, ui_permissions
from container_dashboard.services.filtering import (
    filter_containers,
    filter_feedbacks,
    filter_users,
    matches_search,
)
from container_dashboard.services.warehouses import (
    capacity_tier,
    describe_warehouse,
    summarize_warehouses,
    utilization_percentage,
)
from container_dashboard.store.state import AppState, initial_state


@pytest.fixture(scope="module")
def seeded() -> AppState:
    return initial_state(rounds=4)


def test_search_is_case_insensitive_substring() -> None:
    assert matches_search("cont-00", "CONT-001")
    assert matches_search("", "anything")
    assert matches_search(None, "anything")
    assert not matches_search("xyz", "CONT-001", None)


def test_user_search_and_role_filter_combine(seeded: AppState) -> None:
    assert [user.username for user in filter_users(seeded.users, search="CONTAINER.COM")] == [
        "admin",
        "staff1",
        "user1",
    ]
    assert [user.username for user in filter_users(seeded.users, search="container", role="staff")] == ["staff1"]
    assert filter_users(seeded.users, search="trần", role="admin") == []
    assert len(filter_users(seeded.users, role="all")) == 3


def test_container_search_covers_code_type_and_location() -> None:
    containers = seed_containers()

    assert [c.code for c in filter_containers(containers, search="high cube")] == ["CONT-002"]
    assert [c.code for c in filter_containers(containers, search="quốc lộ")] == ["CONT-003"]
    assert [c.code for c in filter_containers(containers, search="20ft", status="incident")] == ["CONT-003"]
    assert filter_containers(containers, search="cont", status="returning") == []


def test_feedback_filters_on_status_and_type() -> None:
    feedbacks = seed_feedbacks()

    assert [f.id for f in filter_feedbacks(feedbacks, status="pending")] == ["1"]
    assert [f.id for f in filter_feedbacks(feedbacks, feedback_type="suggestion")] == ["2"]
    assert filter_feedbacks(feedbacks, status="pending", feedback_type="suggestion") == []
    assert len(filter_feedbacks(feedbacks, status="all", feedback_type="all")) == 2


def test_overloaded_tier_ignores_stored_status() -> None:
    warehouse = Warehouse(
        id="9",
        name="Test",
        location="Somewhere",
        capacity=80,
        current_load=85,
        status="available",
    )

    described = describe_warehouse(warehouse)
    assert described["utilization_percentage"] == 106
    assert described["capacity_tier"] == "overloaded"
    assert described["status"] == "available"
    assert described["status_mismatch"] is True


@pytest.mark.parametrize(
    "load, capacity, expected_percentage, expected_tier",
    [
        (75, 100, 75, "available"),
        (79.5, 100, 80, "full"),
        (140, 150, 93, "full"),
        (100, 100, 100, "overloaded"),
        (5, 0, 0, "available"),
    ],
)
def test_utilization_thresholds(load, capacity, expected_percentage, expected_tier) -> None:
    percentage = utilization_percentage(load, capacity)
    assert percentage == expected_percentage
    assert capacity_tier(percentage) == expected_tier


def test_warehouse_summary_totals() -> None:
    summary = summarize_warehouses(seed_warehouses())

    assert summary["total_capacity"] == 330
    assert summary["total_load"] == 300
    assert summary["average_utilization"] == 91
    assert summary["overloaded"] == 1


def test_navigation_hides_users_tab_for_non_admins() -> None:
    assert "users" in available_tabs("admin")
    assert available_tabs("staff") == ["dashboard", "containers", "warehouses", "feedback"]
    assert available_tabs("user") == available_tabs("staff")


def test_ui_permissions_per_role() -> None:
    assert ui_permissions("admin")["can_delete_containers"] is True
    assert ui_permissions("staff")["can_edit_containers"] is True
    assert ui_permissions("staff")["can_create_containers"] is False
    assert not any(ui_permissions("user").values())


def test_dashboard_counts(seeded: AppState) -> None:
    overview = compute_dashboard(seeded, seeded.users[0])

    assert overview["welcome_name"] == "Quản trị viên"
    assert overview["containers"] == {"in_transit": 1, "arrived": 1, "incident": 1, "returning": 0, "total": 3}
    assert overview["warehouses"] == {"available": 1, "full": 1, "overloaded": 1, "total": 3}
    assert overview["feedback"] == {"pending": 1, "reviewed": 0, "resolved": 1, "total": 2}
    assert [c.code for c in overview["recent_containers"]] == ["CONT-001", "CONT-002", "CONT-003"]
