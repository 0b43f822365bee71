"""
Pydantic 模式定义
用于 API 请求/响应验证
"""
from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, model_validator
from hotel_booking.models.entities import PaymentStatus


# ============== 客房 Schemas ==============

class RoomBase(BaseModel):
    room_type: str = Field(..., max_length=50)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)


class RoomCreate(RoomBase):
    is_available: bool = True


class RoomAvailabilityUpdate(BaseModel):
    is_available: bool


class RoomResponse(RoomBase):
    id: int
    is_available: bool
    model_config = ConfigDict(from_attributes=True)


# ============== 客人 Schemas ==============

class GuestBase(BaseModel):
    name: str = Field(..., max_length=25)
    email: Optional[str] = Field(None, max_length=25)
    phone: Optional[str] = Field(None, max_length=15)


class GuestCreate(GuestBase):
    join_date: Optional[date] = None


class GuestResponse(GuestBase):
    id: int
    join_date: Optional[date] = None
    model_config = ConfigDict(from_attributes=True)


# ============== 预订 Schemas ==============

class BookingBase(BaseModel):
    guest_id: int
    room_id: int
    check_in: date
    check_out: date
    total_amount: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)


class BookingCreate(BookingBase):

    @model_validator(mode='after')
    def check_stay_range(self):
        """离店日期必须晚于入住日期"""
        if self.check_out <= self.check_in:
            raise ValueError("离店日期必须晚于入住日期")
        return self


class BookingResponse(BookingBase):
    id: int
    model_config = ConfigDict(from_attributes=True)


# ============== 付款 Schemas ==============

class PaymentBase(BaseModel):
    booking_id: int
    amount_paid: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    payment_status: PaymentStatus = PaymentStatus.UNPAID


class PaymentCreate(PaymentBase):
    payment_date: Optional[date] = None


class PaymentResponse(PaymentBase):
    id: int
    payment_date: Optional[date] = None
    model_config = ConfigDict(from_attributes=True)


# ============== 员工 Schemas ==============

class StaffBase(BaseModel):
    name: str = Field(..., max_length=25)
    role: Optional[str] = Field(None, max_length=100)


class StaffCreate(StaffBase):
    pass


class StaffResponse(StaffBase):
    id: int
    model_config = ConfigDict(from_attributes=True)


# ============== 报表 Schemas ==============

class TotalRevenue(BaseModel):
    total_revenue: Decimal


class RoomTypeCount(BaseModel):
    room_type: str
    occupancy_count: int


class PaymentStatusRow(BaseModel):
    booking_id: int
    total_amount: Decimal
    amount_paid: Optional[Decimal] = None
    payment_status: Optional[PaymentStatus] = None


class OccupancyRateRow(BaseModel):
    room_type: str
    total_bookings: int
    occupancy_rate: Optional[float] = None


class GuestBookingCount(BaseModel):
    guest_id: int
    name: str
    booking_count: int


class AverageStayRow(BaseModel):
    room_type: str
    avg_duration: float


class RoomTypeRevenue(BaseModel):
    room_type: str
    total_revenue: Decimal


class OverdueCheckout(BaseModel):
    booking_id: int
    name: str
    check_out: date
    room_type: str


class GuestSpending(BaseModel):
    guest_id: int
    name: str
    total_spent: Decimal


class UpcomingCheckin(BaseModel):
    booking_id: int
    name: str
    check_in: date
    room_type: str


class MonthlyRevenue(BaseModel):
    month: int
    monthly_revenue: Decimal


class IdleRoom(BaseModel):
    room_id: int
    room_type: str


class PopularRoomType(BaseModel):
    room_type: str
    bookings_count: int


class UnpaidBalance(BaseModel):
    booking_id: int
    unpaid_amount: Decimal


class MonthlyRoomOccupancy(BaseModel):
    month: int
    room_type: str
    occupied_days: int


class LatePayment(BaseModel):
    payment_id: int
    booking_id: int
    name: str
    payment_date: date
    check_out: date
