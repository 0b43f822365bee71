"""
报表路由
日期相关报表通过 today 参数指定基准日期，缺省为服务器当天
"""
from datetime import date
from decimal import Decimal
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from hotel_booking.config import settings
from hotel_booking.database import get_db
from hotel_booking.models.schemas import (
    RoomResponse, BookingResponse, TotalRevenue, RoomTypeCount, PaymentStatusRow,
    OccupancyRateRow, GuestBookingCount, AverageStayRow, RoomTypeRevenue,
    OverdueCheckout, GuestSpending, UpcomingCheckin, MonthlyRevenue, IdleRoom,
    PopularRoomType, UnpaidBalance, MonthlyRoomOccupancy, LatePayment
)
from hotel_booking.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["统计报表"])


@router.get("/available-rooms", response_model=List[RoomResponse])
def get_available_rooms(db: Session = Depends(get_db)):
    """可售客房"""
    return ReportService(db).list_available_rooms()


@router.get("/guests/{guest_id}/bookings", response_model=List[BookingResponse])
def get_guest_bookings(guest_id: int, db: Session = Depends(get_db)):
    """客人的预订"""
    return ReportService(db).get_guest_bookings(guest_id)


@router.get("/revenue/total", response_model=TotalRevenue)
def get_total_revenue(db: Session = Depends(get_db)):
    """总营收"""
    return TotalRevenue(total_revenue=ReportService(db).get_total_revenue())


@router.get("/revenue/room-types", response_model=List[RoomTypeRevenue])
def get_revenue_by_room_type(db: Session = Depends(get_db)):
    """各房型营收"""
    return ReportService(db).get_revenue_by_room_type()


@router.get("/revenue/monthly", response_model=List[MonthlyRevenue])
def get_monthly_revenue(
    today: date = Query(default_factory=date.today),
    db: Session = Depends(get_db)
):
    """当年月度营收"""
    return ReportService(db).get_monthly_revenue(today)


@router.get("/occupancy", response_model=List[RoomTypeCount])
def get_room_occupancy(db: Session = Depends(get_db)):
    """各房型预订数"""
    return ReportService(db).get_room_occupancy()


@router.get("/occupancy/rate", response_model=List[OccupancyRateRow])
def get_occupancy_rate(
    today: date = Query(default_factory=date.today),
    db: Session = Depends(get_db)
):
    """各房型入住率（近似指标）"""
    return ReportService(db).get_occupancy_rate(today)


@router.get("/occupancy/monthly", response_model=List[MonthlyRoomOccupancy])
def get_monthly_room_occupancy(db: Session = Depends(get_db)):
    """各月各房型预订数"""
    return ReportService(db).get_monthly_room_occupancy()


@router.get("/occupancy/average-stay", response_model=List[AverageStayRow])
def get_average_stay(db: Session = Depends(get_db)):
    """各房型平均入住天数"""
    return ReportService(db).get_average_stay_by_room_type()


@router.get("/room-types/most-popular", response_model=PopularRoomType)
def get_most_popular_room_type(db: Session = Depends(get_db)):
    """最受欢迎房型"""
    result = ReportService(db).get_most_popular_room_type()
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="暂无预订")
    return result


@router.get("/rooms/idle", response_model=List[IdleRoom])
def get_idle_rooms(
    today: date = Query(default_factory=date.today),
    months: int = Query(default=settings.IDLE_ROOM_MONTHS, ge=0),
    db: Session = Depends(get_db)
):
    """近期无预订的客房"""
    return ReportService(db).get_idle_rooms(today, months)


@router.get("/guests/repeat", response_model=List[GuestBookingCount])
def get_repeat_guests(db: Session = Depends(get_db)):
    """多次预订的客人"""
    return ReportService(db).get_repeat_guests()


@router.get("/guests/high-spending", response_model=List[GuestSpending])
def get_high_spending_guests(
    threshold: Decimal = Query(default=Decimal(settings.HIGH_SPEND_THRESHOLD), ge=0),
    db: Session = Depends(get_db)
):
    """高消费客人"""
    return ReportService(db).get_high_spending_guests(threshold)


@router.get("/guests/top", response_model=List[GuestSpending])
def get_top_guests(
    limit: int = Query(default=settings.TOP_GUESTS_LIMIT, ge=1),
    db: Session = Depends(get_db)
):
    """消费排行"""
    return ReportService(db).get_top_guests(limit)


@router.get("/bookings/overdue", response_model=List[OverdueCheckout])
def get_overdue_checkouts(
    today: date = Query(default_factory=date.today),
    db: Session = Depends(get_db)
):
    """超期未退房"""
    return ReportService(db).get_overdue_checkouts(today)


@router.get("/bookings/upcoming", response_model=List[UpcomingCheckin])
def get_upcoming_checkins(
    today: date = Query(default_factory=date.today),
    days: int = Query(default=settings.UPCOMING_CHECKIN_DAYS, ge=0),
    db: Session = Depends(get_db)
):
    """即将入住"""
    return ReportService(db).get_upcoming_checkins(today, days)


@router.get("/payments/status", response_model=List[PaymentStatusRow])
def get_payment_status(db: Session = Depends(get_db)):
    """预订付款情况"""
    return ReportService(db).get_payment_status_by_booking()


@router.get("/payments/unpaid", response_model=List[UnpaidBalance])
def get_unpaid_balances(db: Session = Depends(get_db)):
    """未付余额"""
    return ReportService(db).get_unpaid_balances()


@router.get("/payments/late", response_model=List[LatePayment])
def get_late_payments(db: Session = Depends(get_db)):
    """逾期付款"""
    return ReportService(db).get_late_payments()
