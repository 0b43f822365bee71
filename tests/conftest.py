"""
Pytest 配置和共享 fixtures
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from datetime import date
from decimal import Decimal
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from hotel_booking.database import Base, get_db
from hotel_booking.models import entities  # noqa
from hotel_booking.models.entities import Room, Guest, Booking, Payment, PaymentStatus
from hotel_booking.seed import seed_sample_data
from hotel_booking.main import app

# 示例数据的基准日期
SEED_DAY = date(2024, 11, 20)


@pytest.fixture(scope="function")
def db_engine():
    """创建内存数据库引擎"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """创建数据库会话"""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """创建测试客户端"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_db(db_session):
    """写入示例数据（付款日期为 2024-11-20）"""
    seed_sample_data(db_session, today=SEED_DAY)
    return db_session


# ============== 实体相关 Fixtures ==============

@pytest.fixture
def sample_room(db_session):
    room = Room(room_type="Single", price=Decimal("100.00"))
    db_session.add(room)
    db_session.commit()
    db_session.refresh(room)
    return room


@pytest.fixture
def sample_guest(db_session):
    guest = Guest(name="Paul Adam", email="pauladam@example.com", phone="1234567890")
    db_session.add(guest)
    db_session.commit()
    db_session.refresh(guest)
    return guest


@pytest.fixture
def sample_booking(db_session, sample_guest, sample_room):
    booking = Booking(
        guest_id=sample_guest.id,
        room_id=sample_room.id,
        check_in=date(2024, 11, 1),
        check_out=date(2024, 11, 5),
        total_amount=Decimal("400.00")
    )
    db_session.add(booking)
    db_session.commit()
    db_session.refresh(booking)
    return booking


@pytest.fixture
def sample_payment(db_session, sample_booking):
    payment = Payment(
        booking_id=sample_booking.id,
        amount_paid=Decimal("400.00"),
        payment_date=date(2024, 11, 5),
        payment_status=PaymentStatus.PAID
    )
    db_session.add(payment)
    db_session.commit()
    db_session.refresh(payment)
    return payment
