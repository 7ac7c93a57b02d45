"""Static seed records used as the initial in-memory state."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from ..config import settings
from ..models.domain import Container, Dimensions, Feedback, User, Warehouse
from ..security import hash_password


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def seed_users(password: Optional[str] = None, *, rounds: Optional[int] = None) -> tuple[User, ...]:
    """Seed accounts. Each one gets its own bcrypt hash of the demo secret."""

    secret = password if password is not None else settings.demo_password
    rows = (
        ("1", "admin", "admin@container.com", "admin", "Quản trị viên", "2024-01-01T00:00:00"),
        ("2", "staff1", "staff1@container.com", "staff", "Nguyễn Văn A", "2024-01-02T00:00:00"),
        ("3", "user1", "user1@container.com", "user", "Trần Thị B", "2024-01-03T00:00:00"),
    )
    return tuple(
        User(
            id=user_id,
            username=username,
            email=email,
            role=role,
            name=name,
            created_at=_ts(created),
            is_active=True,
            password_hash=hash_password(secret, rounds=rounds),
        )
        for user_id, username, email, role, name, created in rows
    )


def seed_containers() -> tuple[Container, ...]:
    return (
        Container(
            id="1",
            code="CONT-001",
            type="20ft Standard",
            status="in_transit",
            warehouse_id="1",
            notes="Hàng hóa điện tử, cần bảo quản khô ráo",
            location="Đang trên đường từ Hải Phòng",
            weight=15000,
            dimensions=Dimensions(length=6, width=2.4, height=2.6),
            created_at=_ts("2024-01-15T08:00:00"),
            updated_at=_ts("2024-01-15T14:30:00"),
            last_updated_by="staff1",
        ),
        Container(
            id="2",
            code="CONT-002",
            type="40ft High Cube",
            status="arrived",
            warehouse_id="1",
            notes="Container thực phẩm, đã kiểm tra nhiệt độ",
            location="Kho A - Vị trí A1-01",
            weight=25000,
            dimensions=Dimensions(length=12, width=2.4, height=2.9),
            created_at=_ts("2024-01-14T10:00:00"),
            updated_at=_ts("2024-01-15T09:15:00"),
            last_updated_by="staff1",
        ),
        Container(
            id="3",
            code="CONT-003",
            type="20ft Standard",
            status="incident",
            warehouse_id="2",
            notes="Gặp sự cố trên đường, cần kiểm tra hàng hóa",
            location="Km 45 Quốc lộ 1A",
            weight=18000,
            dimensions=Dimensions(length=6, width=2.4, height=2.6),
            created_at=_ts("2024-01-13T06:00:00"),
            updated_at=_ts("2024-01-15T11:45:00"),
            last_updated_by="staff1",
        ),
    )


def seed_warehouses() -> tuple[Warehouse, ...]:
    return (
        Warehouse(
            id="1",
            name="Kho Trung tâm Hà Nội",
            location="Km 8, Quốc lộ 5, Hà Nội",
            capacity=100,
            current_load=75,
            status="available",
            containers=("1", "2"),
        ),
        Warehouse(
            id="2",
            name="Kho Hải Phòng",
            location="Cảng Hải Phòng, Hải Phòng",
            capacity=150,
            current_load=140,
            status="full",
            containers=("3",),
        ),
        Warehouse(
            id="3",
            name="Kho TP.HCM",
            location="Khu Công nghiệp Tân Thuận, TP.HCM",
            capacity=80,
            current_load=85,
            status="overloaded",
            containers=(),
        ),
    )


def seed_feedbacks() -> tuple[Feedback, ...]:
    return (
        Feedback(
            id="1",
            user_id="3",
            user_name="Trần Thị B",
            container_id="1",
            message="Container CONT-001 đã quá thời gian dự kiến, xin cập nhật thông tin.",
            type="complaint",
            status="pending",
            created_at=_ts("2024-01-15T13:30:00"),
        ),
        # Response fields only exist on resolved feedback.
        Feedback(
            id="2",
            user_id="3",
            user_name="Trần Thị B",
            message="Đề xuất cải thiện hệ thống thông báo real-time cho khách hàng.",
            type="suggestion",
            status="resolved",
            created_at=_ts("2024-01-14T16:20:00"),
            response="Cảm ơn góp ý, chúng tôi sẽ xem xét cải thiện.",
            responded_by="admin",
            responded_at=_ts("2024-01-15T09:00:00"),
        ),
    )
