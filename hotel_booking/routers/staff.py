"""
员工路由
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from hotel_booking.database import get_db
from hotel_booking.models.schemas import StaffCreate, StaffResponse
from hotel_booking.services.staff_service import StaffService

router = APIRouter(prefix="/staff", tags=["员工管理"])


@router.get("/", response_model=List[StaffResponse])
def list_staff(role: Optional[str] = None, db: Session = Depends(get_db)):
    """获取员工列表"""
    return StaffService(db).get_staff(role=role)


@router.get("/{staff_id}", response_model=StaffResponse)
def get_staff_member(staff_id: int, db: Session = Depends(get_db)):
    member = StaffService(db).get_staff_member(staff_id)
    if not member:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="员工不存在")
    return member


@router.post("/", response_model=StaffResponse)
def create_staff(data: StaffCreate, db: Session = Depends(get_db)):
    """创建员工"""
    try:
        return StaffService(db).create_staff(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
