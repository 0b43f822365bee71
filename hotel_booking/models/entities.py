"""
实体定义
客房、客人、预订、付款、员工五张表及其引用约束
被引用的客人/客房/预订不可删除（RESTRICT）
"""
from datetime import date
from enum import Enum
from sqlalchemy import (
    Column, Integer, String, Date, Boolean, Numeric,
    ForeignKey, CheckConstraint, Enum as SQLEnum
)
from sqlalchemy.orm import relationship
from hotel_booking.database import Base


# ============== 枚举定义 ==============

class PaymentStatus(str, Enum):
    """付款状态枚举"""
    PAID = "Paid"          # 已付
    UNPAID = "Unpaid"      # 未付


# ============== 实体定义 ==============

class Room(Base):
    """
    客房
    is_available 由前台手动维护，预订/退房不会自动改动
    """
    __tablename__ = "rooms"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_rooms_price_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    room_type = Column(String(50), nullable=False)       # 房型
    price = Column(Numeric(10, 2), nullable=False)       # 每晚价格
    is_available = Column(Boolean, default=True, nullable=False)  # 是否可售

    # 链接
    bookings = relationship("Booking", back_populates="room", passive_deletes="all")


class Guest(Base):
    """客人"""
    __tablename__ = "guests"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(25), nullable=False)            # 姓名
    email = Column(String(25), unique=True)              # 邮箱（唯一）
    phone = Column(String(15))                           # 联系电话
    join_date = Column(Date, default=date.today)         # 注册日期

    # 链接
    bookings = relationship("Booking", back_populates="guest", passive_deletes="all")


class Booking(Base):
    """
    预订
    离店日期必须晚于入住日期
    """
    __tablename__ = "bookings"
    __table_args__ = (
        CheckConstraint("check_out > check_in", name="ck_bookings_stay_range"),
        CheckConstraint("total_amount >= 0", name="ck_bookings_total_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    guest_id = Column(Integer, ForeignKey("guests.id", ondelete="RESTRICT"), nullable=False)
    room_id = Column(Integer, ForeignKey("rooms.id", ondelete="RESTRICT"), nullable=False)
    check_in = Column(Date, nullable=False)              # 入住日期
    check_out = Column(Date, nullable=False)             # 离店日期
    total_amount = Column(Numeric(10, 2), nullable=False)  # 订单总额

    # 链接
    guest = relationship("Guest", back_populates="bookings")
    room = relationship("Room", back_populates="bookings")
    payments = relationship("Payment", back_populates="booking", passive_deletes="all")

    @property
    def nights(self) -> int:
        """入住晚数"""
        return (self.check_out - self.check_in).days


class Payment(Base):
    """
    付款记录
    一个预订可以有多笔付款（分次付款）
    """
    __tablename__ = "payments"
    __table_args__ = (
        CheckConstraint("amount_paid >= 0", name="ck_payments_amount_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, ForeignKey("bookings.id", ondelete="RESTRICT"), nullable=False)
    amount_paid = Column(Numeric(10, 2), nullable=False)  # 付款金额
    payment_date = Column(Date, default=date.today)       # 付款日期
    payment_status = Column(
        SQLEnum(
            PaymentStatus,
            name="payment_status",
            values_callable=lambda enum: [member.value for member in enum],
            create_constraint=True,
        ),
        default=PaymentStatus.UNPAID,
        nullable=False,
    )

    # 链接
    booking = relationship("Booking", back_populates="payments")


class Staff(Base):
    """员工，与其他实体无关联"""
    __tablename__ = "staff"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(25), nullable=False)            # 姓名
    role = Column(String(100))                           # 岗位
