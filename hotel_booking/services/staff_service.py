"""
员工服务
"""
from typing import List, Optional
import logging
from sqlalchemy.orm import Session
from hotel_booking.models.entities import Staff
from hotel_booking.models.schemas import StaffCreate
from hotel_booking.services.persistence import commit_or_reject

logger = logging.getLogger(__name__)


class StaffService:
    """员工服务"""

    def __init__(self, db: Session):
        self.db = db

    def get_staff(self, role: Optional[str] = None) -> List[Staff]:
        """获取员工列表"""
        query = self.db.query(Staff)
        if role is not None:
            query = query.filter(Staff.role == role)
        return query.order_by(Staff.id).all()

    def get_staff_member(self, staff_id: int) -> Optional[Staff]:
        return self.db.query(Staff).filter(Staff.id == staff_id).first()

    def create_staff(self, data: StaffCreate) -> Staff:
        """创建员工"""
        staff = Staff(**data.model_dump())
        self.db.add(staff)
        commit_or_reject(self.db, "创建员工")
        self.db.refresh(staff)
        logger.info(f"Staff {staff.id} created ({staff.role})")
        return staff
