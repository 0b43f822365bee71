"""
客房管理路由
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from hotel_booking.database import get_db
from hotel_booking.models.schemas import RoomCreate, RoomResponse, RoomAvailabilityUpdate
from hotel_booking.services.room_service import RoomService

router = APIRouter(prefix="/rooms", tags=["客房管理"])


@router.get("/", response_model=List[RoomResponse])
def list_rooms(
    room_type: Optional[str] = None,
    is_available: Optional[bool] = None,
    db: Session = Depends(get_db)
):
    """获取客房列表"""
    service = RoomService(db)
    return service.get_rooms(room_type=room_type, is_available=is_available)


@router.get("/{room_id}", response_model=RoomResponse)
def get_room(room_id: int, db: Session = Depends(get_db)):
    """获取客房详情"""
    room = RoomService(db).get_room(room_id)
    if not room:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="客房不存在")
    return room


@router.post("/", response_model=RoomResponse)
def create_room(data: RoomCreate, db: Session = Depends(get_db)):
    """创建客房"""
    service = RoomService(db)
    try:
        return service.create_room(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{room_id}/availability", response_model=RoomResponse)
def update_room_availability(
    room_id: int,
    data: RoomAvailabilityUpdate,
    db: Session = Depends(get_db)
):
    """设置客房可售状态"""
    service = RoomService(db)
    if not service.get_room(room_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="客房不存在")
    try:
        return service.set_availability(room_id, data.is_available)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{room_id}")
def delete_room(room_id: int, db: Session = Depends(get_db)):
    """删除客房"""
    service = RoomService(db)
    if not service.get_room(room_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="客房不存在")
    try:
        service.delete_room(room_id)
        return {"message": "客房已删除"}
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
