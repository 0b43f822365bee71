"""
报表服务 - 只读查询
提供客房、营收、客人、付款相关的经营统计

所有与"今天"相关的查询都接受显式的 today 参数，
未传入时使用注入的时钟（默认 date.today）。
"""
import calendar
import logging
from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal
from typing import Callable, List, Optional
from sqlalchemy import func, desc, and_, extract
from sqlalchemy.orm import Session
from hotel_booking.config import settings
from hotel_booking.models.entities import Room, Guest, Booking, Payment

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def months_before(day: date, months: int) -> date:
    """往前推若干个自然月，日期超出当月天数时取月末"""
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


class ReportService:
    """报表服务"""

    def __init__(self, db: Session, clock: Callable[[], date] = None):
        self.db = db
        # 支持注入时钟，保证日期相关报表可复现
        self._clock = clock or date.today

    def _resolve_today(self, today: Optional[date]) -> date:
        return today if today is not None else self._clock()

    # ============== 单项查询 ==============

    def list_available_rooms(self) -> List[Room]:
        """可售客房"""
        return self.db.query(Room).filter(Room.is_available == True).order_by(Room.id).all()

    def get_guest_bookings(self, guest_id: int) -> List[Booking]:
        """某位客人的全部预订"""
        return self.db.query(Booking).filter(
            Booking.guest_id == guest_id
        ).order_by(Booking.id).all()

    # ============== 营收 ==============

    def get_total_revenue(self) -> Decimal:
        """预订总营收"""
        total = self.db.query(func.sum(Booking.total_amount)).scalar()
        return total if total is not None else Decimal("0")

    def get_revenue_by_room_type(self) -> List[dict]:
        """各房型营收"""
        rows = self.db.query(
            Room.room_type,
            func.sum(Booking.total_amount).label("total_revenue")
        ).join(Booking, Booking.room_id == Room.id).group_by(
            Room.room_type
        ).order_by(Room.room_type).all()

        return [
            {'room_type': row.room_type, 'total_revenue': row.total_revenue}
            for row in rows
        ]

    def get_monthly_revenue(self, today: Optional[date] = None) -> List[dict]:
        """当年各月营收（按入住月份）"""
        today = self._resolve_today(today)
        month = extract("month", Booking.check_in)

        rows = self.db.query(
            month.label("month"),
            func.sum(Booking.total_amount).label("monthly_revenue")
        ).filter(
            Booking.check_in >= date(today.year, 1, 1),
            Booking.check_in <= date(today.year, 12, 31)
        ).group_by(month).order_by(month).all()

        return [
            {'month': int(row.month), 'monthly_revenue': row.monthly_revenue}
            for row in rows
        ]

    # ============== 入住统计 ==============

    def get_room_occupancy(self) -> List[dict]:
        """各房型预订数"""
        rows = self.db.query(
            Room.room_type,
            func.count(Booking.id).label("occupancy_count")
        ).select_from(Booking).join(Room, Booking.room_id == Room.id).group_by(
            Room.room_type
        ).order_by(Room.room_type).all()

        return [
            {'room_type': row.room_type, 'occupancy_count': row.occupancy_count}
            for row in rows
        ]

    def get_occupancy_rate(self, today: Optional[date] = None) -> List[dict]:
        """
        各房型"入住率"

        occupancy_rate = 预订数 / (today - 该房型最早入住日期).days * 100

        这是一个近似指标：不考虑同房型的房间数量，也不考虑重叠入住，
        只是保持原有报表口径。没有预订或天数为 0 时为 None。
        """
        today = self._resolve_today(today)

        rows = self.db.query(
            Room.room_type,
            func.count(Booking.id).label("total_bookings"),
            func.min(Booking.check_in).label("first_check_in")
        ).select_from(Room).outerjoin(Booking, Booking.room_id == Room.id).group_by(
            Room.room_type
        ).order_by(Room.room_type).all()

        result = []
        for row in rows:
            rate = None
            if row.first_check_in is not None:
                span = (today - row.first_check_in).days
                if span != 0:
                    rate = round(row.total_bookings / span * 100, 2)
            result.append({
                'room_type': row.room_type,
                'total_bookings': row.total_bookings,
                'occupancy_rate': rate
            })

        logger.debug(f"Occupancy rate computed for {len(result)} room types as of {today}")
        return result

    def get_average_stay_by_room_type(self) -> List[dict]:
        """各房型平均入住天数"""
        rows = self.db.query(
            Room.room_type, Booking.check_in, Booking.check_out
        ).join(Booking, Booking.room_id == Room.id).all()

        nights_by_type = defaultdict(list)
        for row in rows:
            nights_by_type[row.room_type].append((row.check_out - row.check_in).days)

        return [
            {
                'room_type': room_type,
                'avg_duration': round(sum(nights) / len(nights), 4)
            }
            for room_type, nights in sorted(nights_by_type.items())
        ]

    def get_monthly_room_occupancy(self) -> List[dict]:
        """各月各房型预订数（按入住月份，不区分年份）"""
        month = extract("month", Booking.check_in)

        rows = self.db.query(
            month.label("month"),
            Room.room_type,
            func.count(Booking.id).label("occupied_days")
        ).select_from(Booking).join(Room, Booking.room_id == Room.id).group_by(
            month, Room.room_type
        ).order_by(month, Room.room_type).all()

        return [
            {
                'month': int(row.month),
                'room_type': row.room_type,
                'occupied_days': row.occupied_days
            }
            for row in rows
        ]

    def get_most_popular_room_type(self) -> Optional[dict]:
        """预订最多的房型，并列时取房型名排序靠前者"""
        bookings_count = func.count(Booking.id)

        row = self.db.query(
            Room.room_type,
            bookings_count.label("bookings_count")
        ).select_from(Booking).join(Room, Booking.room_id == Room.id).group_by(
            Room.room_type
        ).order_by(desc(bookings_count), Room.room_type).first()

        if row is None:
            return None
        return {'room_type': row.room_type, 'bookings_count': row.bookings_count}

    # ============== 客人分析 ==============

    def get_repeat_guests(self) -> List[dict]:
        """多次预订的客人"""
        booking_count = func.count(Booking.id)

        rows = self.db.query(
            Guest.id, Guest.name, booking_count.label("booking_count")
        ).join(Booking, Booking.guest_id == Guest.id).group_by(
            Guest.id, Guest.name
        ).having(booking_count > 1).order_by(Guest.id).all()

        return [
            {'guest_id': row.id, 'name': row.name, 'booking_count': row.booking_count}
            for row in rows
        ]

    def get_high_spending_guests(self, threshold: Optional[Decimal] = None) -> List[dict]:
        """累计消费超过阈值的客人"""
        if threshold is None:
            threshold = settings.HIGH_SPEND_THRESHOLD
        total_spent = func.sum(Booking.total_amount)

        rows = self.db.query(
            Guest.id, Guest.name, total_spent.label("total_spent")
        ).join(Booking, Booking.guest_id == Guest.id).group_by(
            Guest.id, Guest.name
        ).having(total_spent > threshold).order_by(Guest.id).all()

        return [
            {'guest_id': row.id, 'name': row.name, 'total_spent': row.total_spent}
            for row in rows
        ]

    def get_top_guests(self, limit: Optional[int] = None) -> List[dict]:
        """消费排行（并列时按客人编号）"""
        if limit is None:
            limit = settings.TOP_GUESTS_LIMIT
        total_spent = func.sum(Booking.total_amount)

        rows = self.db.query(
            Guest.id, Guest.name, total_spent.label("total_spent")
        ).join(Booking, Booking.guest_id == Guest.id).group_by(
            Guest.id, Guest.name
        ).order_by(desc(total_spent), Guest.id).limit(limit).all()

        return [
            {'guest_id': row.id, 'name': row.name, 'total_spent': row.total_spent}
            for row in rows
        ]

    # ============== 异常报表 ==============

    def get_overdue_checkouts(self, today: Optional[date] = None) -> List[dict]:
        """超期未退房：离店日期已过且客房仍标记为不可售"""
        today = self._resolve_today(today)

        rows = self.db.query(
            Booking.id, Guest.name, Booking.check_out, Room.room_type
        ).join(Guest, Booking.guest_id == Guest.id).join(
            Room, Booking.room_id == Room.id
        ).filter(
            Booking.check_out < today,
            Room.is_available == False
        ).order_by(Booking.id).all()

        return [
            {
                'booking_id': row.id,
                'name': row.name,
                'check_out': row.check_out,
                'room_type': row.room_type
            }
            for row in rows
        ]

    def get_payment_status_by_booking(self) -> List[dict]:
        """每个预订的付款情况（无付款的预订也列出）"""
        rows = self.db.query(
            Booking.id, Booking.total_amount, Payment.amount_paid, Payment.payment_status
        ).outerjoin(Payment, Payment.booking_id == Booking.id).order_by(
            Booking.id, Payment.id
        ).all()

        return [
            {
                'booking_id': row.id,
                'total_amount': row.total_amount,
                'amount_paid': row.amount_paid,
                'payment_status': row.payment_status
            }
            for row in rows
        ]

    def get_unpaid_balances(self) -> List[dict]:
        """未付余额：订单总额减去已付合计，只列出大于 0 的预订"""
        rows = self.db.query(
            Booking.id,
            Booking.total_amount,
            func.sum(Payment.amount_paid).label("paid")
        ).outerjoin(Payment, Payment.booking_id == Booking.id).group_by(
            Booking.id, Booking.total_amount
        ).order_by(Booking.id).all()

        result = []
        for row in rows:
            paid = row.paid if row.paid is not None else Decimal("0")
            unpaid = (Decimal(row.total_amount) - Decimal(paid)).quantize(CENT)
            if unpaid > 0:
                result.append({'booking_id': row.id, 'unpaid_amount': unpaid})
        return result

    def get_late_payments(self) -> List[dict]:
        """离店后才付款的记录"""
        rows = self.db.query(
            Payment.id.label("payment_id"),
            Booking.id.label("booking_id"),
            Guest.name,
            Payment.payment_date,
            Booking.check_out
        ).select_from(Payment).join(
            Booking, Payment.booking_id == Booking.id
        ).join(Guest, Booking.guest_id == Guest.id).filter(
            Payment.payment_date > Booking.check_out
        ).order_by(Payment.id).all()

        return [
            {
                'payment_id': row.payment_id,
                'booking_id': row.booking_id,
                'name': row.name,
                'payment_date': row.payment_date,
                'check_out': row.check_out
            }
            for row in rows
        ]

    # ============== 预测 ==============

    def get_upcoming_checkins(self, today: Optional[date] = None,
                              days: Optional[int] = None) -> List[dict]:
        """未来若干天内（含首尾）的入住"""
        today = self._resolve_today(today)
        if days is None:
            days = settings.UPCOMING_CHECKIN_DAYS

        rows = self.db.query(
            Booking.id, Guest.name, Booking.check_in, Room.room_type
        ).join(Guest, Booking.guest_id == Guest.id).join(
            Room, Booking.room_id == Room.id
        ).filter(
            Booking.check_in.between(today, today + timedelta(days=days))
        ).order_by(Booking.check_in, Booking.id).all()

        return [
            {
                'booking_id': row.id,
                'name': row.name,
                'check_in': row.check_in,
                'room_type': row.room_type
            }
            for row in rows
        ]

    def get_idle_rooms(self, today: Optional[date] = None,
                       months: Optional[int] = None) -> List[dict]:
        """最近若干个月没有入住记录的客房"""
        today = self._resolve_today(today)
        if months is None:
            months = settings.IDLE_ROOM_MONTHS
        cutoff = months_before(today, months)

        rows = self.db.query(Room.id, Room.room_type).outerjoin(
            Booking,
            and_(Booking.room_id == Room.id, Booking.check_in >= cutoff)
        ).filter(Booking.id.is_(None)).order_by(Room.id).all()

        return [{'room_id': row.id, 'room_type': row.room_type} for row in rows]
