"""
Tests for hotel_booking/services/guest_service.py
Covers: get_guests, get_guest, get_guest_by_email, create_guest, delete_guest
"""
import pytest
from datetime import date

from hotel_booking.models.entities import Guest
from hotel_booking.models.schemas import GuestCreate
from hotel_booking.services.guest_service import GuestService


class TestCreateGuest:

    def test_join_date_from_clock(self, db_session):
        svc = GuestService(db_session, clock=lambda: date(2024, 10, 1))
        guest = svc.create_guest(GuestCreate(name="Paul Adam", email="pauladam@example.com"))
        assert guest.join_date == date(2024, 10, 1)

    def test_explicit_join_date(self, db_session):
        guest = GuestService(db_session).create_guest(
            GuestCreate(name="Paul Adam", join_date=date(2023, 1, 1))
        )
        assert guest.join_date == date(2023, 1, 1)

    def test_duplicate_email_rejected(self, db_session, sample_guest):
        svc = GuestService(db_session)
        with pytest.raises(ValueError, match="创建客人失败"):
            svc.create_guest(GuestCreate(name="Other", email=sample_guest.email))

        # 回滚后会话仍可用
        assert db_session.query(Guest).count() == 1
        svc.create_guest(GuestCreate(name="Other", email="other@example.com"))
        assert db_session.query(Guest).count() == 2


class TestGetGuests:

    def test_lookup(self, seeded_db):
        svc = GuestService(seeded_db)
        assert [g.name for g in svc.get_guests()] == ["Paul Adam", "Devon McGraw"]
        assert svc.get_guest_by_email("devonmcgraw@example.com").name == "Devon McGraw"
        assert svc.get_guest_by_email("nobody@example.com") is None

    def test_limit(self, seeded_db):
        assert len(GuestService(seeded_db).get_guests(limit=1)) == 1


class TestDeleteGuest:

    def test_delete_unreferenced(self, db_session, sample_guest):
        svc = GuestService(db_session)
        assert svc.delete_guest(sample_guest.id) is True
        assert svc.get_guest(sample_guest.id) is None

    def test_delete_with_bookings_rejected(self, db_session, sample_booking):
        with pytest.raises(ValueError, match="无法删除"):
            GuestService(db_session).delete_guest(sample_booking.guest_id)

    def test_delete_missing(self, db_session):
        with pytest.raises(ValueError, match="客人不存在"):
            GuestService(db_session).delete_guest(999)
