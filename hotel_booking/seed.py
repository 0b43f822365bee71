"""
示例数据
三间客房、两位客人、两条预订及付款、两名员工

用法：python -m hotel_booking.seed
"""
from datetime import date
from decimal import Decimal
from sqlalchemy.orm import Session
from hotel_booking.models.entities import (
    Room, Guest, Booking, Payment, PaymentStatus, Staff
)

SAMPLE_ROOMS = [
    ("Single", Decimal("100.00")),
    ("Double", Decimal("150.00")),
    ("Suite", Decimal("300.00")),
]

SAMPLE_GUESTS = [
    ("Paul Adam", "pauladam@example.com", "1234567890"),
    ("Devon McGraw", "devonmcgraw@example.com", "0987654321"),
]

# (客人序号, 客房序号, 入住, 离店, 总额)
SAMPLE_BOOKINGS = [
    (0, 0, date(2024, 11, 1), date(2024, 11, 5), Decimal("400.00")),
    (1, 1, date(2024, 11, 10), date(2024, 11, 15), Decimal("750.00")),
]

# (预订序号, 金额, 状态)
SAMPLE_PAYMENTS = [
    (0, Decimal("400.00"), PaymentStatus.PAID),
    (1, Decimal("750.00"), PaymentStatus.PAID),
]

SAMPLE_STAFF = [
    ("Stain Hill", "Manager"),
    ("Steave Harris", "Receptionist"),
]


def seed_sample_data(db: Session, today: date = None) -> dict:
    """写入示例数据；已有客房时跳过。返回各表新增行数"""
    stats = {"rooms": 0, "guests": 0, "bookings": 0, "payments": 0, "staff": 0}
    if db.query(Room).first() is not None:
        return stats

    today = today or date.today()

    rooms = [Room(room_type=room_type, price=price) for room_type, price in SAMPLE_ROOMS]
    guests = [
        Guest(name=name, email=email, phone=phone, join_date=today)
        for name, email, phone in SAMPLE_GUESTS
    ]
    db.add_all(rooms + guests)
    db.flush()

    bookings = [
        Booking(
            guest_id=guests[g].id, room_id=rooms[r].id,
            check_in=check_in, check_out=check_out, total_amount=total
        )
        for g, r, check_in, check_out, total in SAMPLE_BOOKINGS
    ]
    db.add_all(bookings)
    db.flush()

    payments = [
        Payment(
            booking_id=bookings[b].id, amount_paid=amount,
            payment_date=today, payment_status=payment_status
        )
        for b, amount, payment_status in SAMPLE_PAYMENTS
    ]
    staff = [Staff(name=name, role=role) for name, role in SAMPLE_STAFF]
    db.add_all(payments + staff)
    db.commit()

    stats.update(
        rooms=len(rooms), guests=len(guests), bookings=len(bookings),
        payments=len(payments), staff=len(staff)
    )
    return stats


if __name__ == "__main__":
    from hotel_booking.database import SessionLocal, init_db

    init_db()
    db = SessionLocal()
    try:
        result = seed_sample_data(db)
        if any(result.values()):
            print(f"示例数据已写入: {result}")
        else:
            print("已有数据，跳过")
    finally:
        db.close()
