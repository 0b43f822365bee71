"""
付款服务
记录付款，一个预订允许多笔付款
"""
from typing import Callable, List, Optional
from datetime import date
import logging
from sqlalchemy.orm import Session
from hotel_booking.models.entities import Payment, PaymentStatus, Booking
from hotel_booking.models.schemas import PaymentCreate
from hotel_booking.services.persistence import commit_or_reject

logger = logging.getLogger(__name__)


class PaymentService:
    """付款服务"""

    def __init__(self, db: Session, clock: Callable[[], date] = None):
        self.db = db
        self._today = clock or date.today

    def get_payments(self, status: Optional[PaymentStatus] = None) -> List[Payment]:
        """获取付款列表"""
        query = self.db.query(Payment)
        if status is not None:
            query = query.filter(Payment.payment_status == status)
        return query.order_by(Payment.id).all()

    def get_booking_payments(self, booking_id: int) -> List[Payment]:
        """获取某预订的全部付款"""
        return self.db.query(Payment).filter(
            Payment.booking_id == booking_id
        ).order_by(Payment.id).all()

    def record_payment(self, data: PaymentCreate) -> Payment:
        """记录付款，付款日期缺省为当天"""
        if not self.db.query(Booking).filter(Booking.id == data.booking_id).first():
            raise ValueError(f"预订 {data.booking_id} 不存在")

        values = data.model_dump()
        if values.get("payment_date") is None:
            values["payment_date"] = self._today()

        payment = Payment(**values)
        self.db.add(payment)
        commit_or_reject(self.db, "记录付款")
        self.db.refresh(payment)
        logger.info(
            f"Payment {payment.id} recorded for booking {payment.booking_id}: "
            f"{payment.amount_paid} ({payment.payment_status.value})"
        )
        return payment
