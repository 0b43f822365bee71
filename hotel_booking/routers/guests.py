"""
客人管理路由
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from hotel_booking.database import get_db
from hotel_booking.models.schemas import GuestCreate, GuestResponse
from hotel_booking.services.guest_service import GuestService

router = APIRouter(prefix="/guests", tags=["客人管理"])


@router.get("/", response_model=List[GuestResponse])
def list_guests(limit: int = 100, db: Session = Depends(get_db)):
    """获取客人列表"""
    return GuestService(db).get_guests(limit=limit)


@router.get("/{guest_id}", response_model=GuestResponse)
def get_guest(guest_id: int, db: Session = Depends(get_db)):
    """获取客人详情"""
    guest = GuestService(db).get_guest(guest_id)
    if not guest:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="客人不存在")
    return guest


@router.post("/", response_model=GuestResponse)
def create_guest(data: GuestCreate, db: Session = Depends(get_db)):
    """登记客人"""
    service = GuestService(db)
    try:
        return service.create_guest(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{guest_id}")
def delete_guest(guest_id: int, db: Session = Depends(get_db)):
    """删除客人"""
    service = GuestService(db)
    if not service.get_guest(guest_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="客人不存在")
    try:
        service.delete_guest(guest_id)
        return {"message": "客人已删除"}
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
