# API Routers
from hotel_booking.routers import rooms, guests, bookings, payments, staff, reports

__all__ = ['rooms', 'guests', 'bookings', 'payments', 'staff', 'reports']
