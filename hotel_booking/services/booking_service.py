"""
预订服务
创建预订前检查客人与客房存在，最终以存储层外键约束为准
"""
from typing import List, Optional
import logging
from sqlalchemy.orm import Session
from hotel_booking.models.entities import Booking, Guest, Room, Payment
from hotel_booking.models.schemas import BookingCreate
from hotel_booking.services.persistence import commit_or_reject

logger = logging.getLogger(__name__)


class BookingService:
    """预订服务"""

    def __init__(self, db: Session):
        self.db = db

    def get_bookings(self, guest_id: Optional[int] = None,
                     room_id: Optional[int] = None) -> List[Booking]:
        """获取预订列表"""
        query = self.db.query(Booking)

        if guest_id is not None:
            query = query.filter(Booking.guest_id == guest_id)
        if room_id is not None:
            query = query.filter(Booking.room_id == room_id)

        return query.order_by(Booking.id).all()

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        """获取单个预订"""
        return self.db.query(Booking).filter(Booking.id == booking_id).first()

    def create_booking(self, data: BookingCreate) -> Booking:
        """创建预订"""
        if not self.db.query(Guest).filter(Guest.id == data.guest_id).first():
            raise ValueError(f"客人 {data.guest_id} 不存在")
        if not self.db.query(Room).filter(Room.id == data.room_id).first():
            raise ValueError(f"客房 {data.room_id} 不存在")

        booking = Booking(**data.model_dump())
        self.db.add(booking)
        commit_or_reject(self.db, "创建预订")
        self.db.refresh(booking)
        logger.info(
            f"Booking {booking.id} created: guest {booking.guest_id}, room {booking.room_id}, "
            f"{booking.check_in} -> {booking.check_out}"
        )
        return booking

    def delete_booking(self, booking_id: int) -> bool:
        """删除预订，存在付款记录时拒绝"""
        booking = self.get_booking(booking_id)
        if not booking:
            raise ValueError("预订不存在")

        payment_count = self.db.query(Payment).filter(Payment.booking_id == booking_id).count()
        if payment_count > 0:
            raise ValueError(f"该预订有 {payment_count} 笔付款，无法删除")

        self.db.delete(booking)
        commit_or_reject(self.db, "删除预订")
        logger.info(f"Booking {booking_id} deleted")
        return True
