"""
酒店预订台账 主应用入口
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from hotel_booking import __version__
from hotel_booking.config import settings
from hotel_booking.database import init_db, SessionLocal
from hotel_booking.routers import rooms, guests, bookings, payments, staff, reports

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # 初始化数据库
    init_db()
    logger.info(f"Database ready: {settings.DATABASE_URL}")

    if settings.SEED_ON_STARTUP:
        from hotel_booking.seed import seed_sample_data
        db = SessionLocal()
        try:
            stats = seed_sample_data(db)
            if any(stats.values()):
                logger.info(f"Sample data seeded: {stats}")
        finally:
            db.close()

    yield


# 创建应用
app = FastAPI(
    title=settings.APP_NAME,
    description="客房、客人、预订、付款、员工台账与经营报表",
    version=__version__,
    lifespan=lifespan,
    debug=settings.DEBUG
)

# 注册路由
app.include_router(rooms.router)
app.include_router(guests.router)
app.include_router(bookings.router)
app.include_router(payments.router)
app.include_router(staff.router)
app.include_router(reports.router)


@app.get("/")
def root():
    """根路径"""
    return {
        "name": settings.APP_NAME,
        "version": __version__
    }


@app.get("/health")
def health_check():
    """健康检查"""
    return {"status": "healthy"}
