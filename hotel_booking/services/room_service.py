"""
客房服务
管理 Room 对象，可售状态只通过 set_availability 手动变更
"""
from typing import List, Optional
import logging
from sqlalchemy.orm import Session
from hotel_booking.models.entities import Room, Booking
from hotel_booking.models.schemas import RoomCreate
from hotel_booking.services.persistence import commit_or_reject

logger = logging.getLogger(__name__)


class RoomService:
    """客房服务"""

    def __init__(self, db: Session):
        self.db = db

    def get_rooms(self, room_type: Optional[str] = None,
                  is_available: Optional[bool] = None) -> List[Room]:
        """获取客房列表"""
        query = self.db.query(Room)

        if room_type is not None:
            query = query.filter(Room.room_type == room_type)
        if is_available is not None:
            query = query.filter(Room.is_available == is_available)

        return query.order_by(Room.id).all()

    def get_room(self, room_id: int) -> Optional[Room]:
        """获取单个客房"""
        return self.db.query(Room).filter(Room.id == room_id).first()

    def create_room(self, data: RoomCreate) -> Room:
        """创建客房"""
        room = Room(**data.model_dump())
        self.db.add(room)
        commit_or_reject(self.db, "创建客房")
        self.db.refresh(room)
        logger.info(f"Room {room.id} created ({room.room_type}, {room.price})")
        return room

    def set_availability(self, room_id: int, is_available: bool) -> Room:
        """设置客房可售状态（入住/退房时由前台手动调用）"""
        room = self.get_room(room_id)
        if not room:
            raise ValueError("客房不存在")

        room.is_available = is_available
        commit_or_reject(self.db, "更新客房状态")
        self.db.refresh(room)
        logger.info(f"Room {room_id} availability set to {is_available}")
        return room

    def delete_room(self, room_id: int) -> bool:
        """删除客房，存在预订时拒绝"""
        room = self.get_room(room_id)
        if not room:
            raise ValueError("客房不存在")

        booking_count = self.db.query(Booking).filter(Booking.room_id == room_id).count()
        if booking_count > 0:
            raise ValueError(f"该客房有 {booking_count} 条预订，无法删除")

        self.db.delete(room)
        commit_or_reject(self.db, "删除客房")
        logger.info(f"Room {room_id} deleted")
        return True
