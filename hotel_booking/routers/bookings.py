"""
预订管理路由
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from hotel_booking.database import get_db
from hotel_booking.models.schemas import BookingCreate, BookingResponse
from hotel_booking.services.booking_service import BookingService

router = APIRouter(prefix="/bookings", tags=["预订管理"])


@router.get("/", response_model=List[BookingResponse])
def list_bookings(
    guest_id: Optional[int] = None,
    room_id: Optional[int] = None,
    db: Session = Depends(get_db)
):
    """获取预订列表"""
    return BookingService(db).get_bookings(guest_id=guest_id, room_id=room_id)


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(booking_id: int, db: Session = Depends(get_db)):
    """获取预订详情"""
    booking = BookingService(db).get_booking(booking_id)
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="预订不存在")
    return booking


@router.post("/", response_model=BookingResponse)
def create_booking(data: BookingCreate, db: Session = Depends(get_db)):
    """创建预订"""
    service = BookingService(db)
    try:
        return service.create_booking(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{booking_id}")
def delete_booking(booking_id: int, db: Session = Depends(get_db)):
    """删除预订"""
    service = BookingService(db)
    if not service.get_booking(booking_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="预订不存在")
    try:
        service.delete_booking(booking_id)
        return {"message": "预订已删除"}
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
