# Entity Models
from hotel_booking.models.entities import (
    PaymentStatus, Room, Guest, Booking, Payment, Staff
)

__all__ = [
    'PaymentStatus', 'Room', 'Guest', 'Booking', 'Payment', 'Staff'
]
