"""
付款路由
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from hotel_booking.database import get_db
from hotel_booking.models.entities import PaymentStatus
from hotel_booking.models.schemas import PaymentCreate, PaymentResponse
from hotel_booking.services.payment_service import PaymentService

router = APIRouter(prefix="/payments", tags=["付款管理"])


@router.get("/", response_model=List[PaymentResponse])
def list_payments(
    payment_status: Optional[PaymentStatus] = None,
    booking_id: Optional[int] = None,
    db: Session = Depends(get_db)
):
    """获取付款列表"""
    service = PaymentService(db)
    if booking_id is not None:
        payments = service.get_booking_payments(booking_id)
        if payment_status is not None:
            payments = [p for p in payments if p.payment_status == payment_status]
        return payments
    return service.get_payments(status=payment_status)


@router.post("/", response_model=PaymentResponse)
def record_payment(data: PaymentCreate, db: Session = Depends(get_db)):
    """记录付款"""
    service = PaymentService(db)
    try:
        return service.record_payment(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
