"""
Tests for hotel_booking/services/booking_service.py
Covers: get_bookings, get_booking, create_booking, delete_booking
"""
import pytest
from datetime import date
from decimal import Decimal
from pydantic import ValidationError

from hotel_booking.models.entities import Booking, Guest, Room
from hotel_booking.models.schemas import BookingCreate
from hotel_booking.services.booking_service import BookingService


def _data(guest_id, room_id, check_in=date(2024, 11, 1), check_out=date(2024, 11, 5)):
    return BookingCreate(guest_id=guest_id, room_id=room_id, check_in=check_in,
                         check_out=check_out, total_amount=Decimal("400.00"))


class TestCreateBooking:

    def test_create(self, db_session, sample_guest, sample_room):
        booking = BookingService(db_session).create_booking(_data(sample_guest.id, sample_room.id))
        assert booking.id is not None
        assert booking.nights == 4

    def test_missing_guest(self, db_session, sample_room):
        with pytest.raises(ValueError, match="客人 999 不存在"):
            BookingService(db_session).create_booking(_data(999, sample_room.id))
        assert db_session.query(Booking).count() == 0

    def test_missing_room(self, db_session, sample_guest):
        with pytest.raises(ValueError, match="客房 999 不存在"):
            BookingService(db_session).create_booking(_data(sample_guest.id, 999))

    def test_check_out_before_check_in(self):
        with pytest.raises(ValidationError):
            _data(1, 1, check_in=date(2024, 11, 5), check_out=date(2024, 11, 1))

    def test_same_day_rejected(self):
        with pytest.raises(ValidationError):
            _data(1, 1, check_in=date(2024, 11, 5), check_out=date(2024, 11, 5))

    def test_guest_may_book_two_rooms(self, seeded_db):
        devon = seeded_db.query(Guest).filter(Guest.name == "Devon McGraw").one()
        suite = seeded_db.query(Room).filter(Room.room_type == "Suite").one()
        svc = BookingService(seeded_db)
        svc.create_booking(_data(devon.id, suite.id, date(2024, 12, 1), date(2024, 12, 3)))
        assert len(svc.get_bookings(guest_id=devon.id)) == 2


class TestGetBookings:

    def test_filters(self, seeded_db):
        svc = BookingService(seeded_db)
        assert len(svc.get_bookings()) == 2
        double = seeded_db.query(Room).filter(Room.room_type == "Double").one()
        assert [b.room_id for b in svc.get_bookings(room_id=double.id)] == [double.id]
        assert svc.get_booking(999) is None


class TestDeleteBooking:

    def test_delete_unpaid_booking(self, db_session, sample_booking):
        svc = BookingService(db_session)
        assert svc.delete_booking(sample_booking.id) is True
        assert svc.get_booking(sample_booking.id) is None

    def test_delete_with_payments_rejected(self, db_session, sample_payment):
        with pytest.raises(ValueError, match="无法删除"):
            BookingService(db_session).delete_booking(sample_payment.booking_id)
