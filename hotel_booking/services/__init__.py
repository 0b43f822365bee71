# Business Services
from hotel_booking.services.room_service import RoomService
from hotel_booking.services.guest_service import GuestService
from hotel_booking.services.booking_service import BookingService
from hotel_booking.services.payment_service import PaymentService
from hotel_booking.services.staff_service import StaffService
from hotel_booking.services.report_service import ReportService

__all__ = [
    'RoomService', 'GuestService', 'BookingService',
    'PaymentService', 'StaffService', 'ReportService'
]
