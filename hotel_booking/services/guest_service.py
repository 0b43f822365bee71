"""
客人服务
管理 Guest 对象，注册后信息不可修改
"""
from typing import Callable, List, Optional
from datetime import date
import logging
from sqlalchemy.orm import Session
from hotel_booking.models.entities import Guest, Booking
from hotel_booking.models.schemas import GuestCreate
from hotel_booking.services.persistence import commit_or_reject

logger = logging.getLogger(__name__)


class GuestService:
    """客人服务"""

    def __init__(self, db: Session, clock: Callable[[], date] = None):
        self.db = db
        # 支持注入时钟，便于测试
        self._today = clock or date.today

    def get_guests(self, limit: int = 100) -> List[Guest]:
        """获取客人列表"""
        return self.db.query(Guest).order_by(Guest.id).limit(limit).all()

    def get_guest(self, guest_id: int) -> Optional[Guest]:
        """获取单个客人"""
        return self.db.query(Guest).filter(Guest.id == guest_id).first()

    def get_guest_by_email(self, email: str) -> Optional[Guest]:
        """根据邮箱获取客人"""
        return self.db.query(Guest).filter(Guest.email == email).first()

    def create_guest(self, data: GuestCreate) -> Guest:
        """创建客人，邮箱重复由存储层拒绝"""
        values = data.model_dump()
        if values.get("join_date") is None:
            values["join_date"] = self._today()

        guest = Guest(**values)
        self.db.add(guest)
        commit_or_reject(self.db, "创建客人")
        self.db.refresh(guest)
        logger.info(f"Guest {guest.id} registered")
        return guest

    def delete_guest(self, guest_id: int) -> bool:
        """删除客人，存在预订时拒绝"""
        guest = self.get_guest(guest_id)
        if not guest:
            raise ValueError("客人不存在")

        booking_count = self.db.query(Booking).filter(Booking.guest_id == guest_id).count()
        if booking_count > 0:
            raise ValueError(f"该客人有 {booking_count} 条预订，无法删除")

        self.db.delete(guest)
        commit_or_reject(self.db, "删除客人")
        logger.info(f"Guest {guest_id} deleted")
        return True
