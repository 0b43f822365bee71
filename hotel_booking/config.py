"""
应用配置
从环境变量读取配置
"""
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """应用设置"""

    # 应用基础配置
    APP_NAME: str = "Hotel Booking Ledger"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # 数据库配置
    DATABASE_URL: str = "sqlite:///./hotel_booking.db"
    SEED_ON_STARTUP: bool = False

    # 报表参数
    HIGH_SPEND_THRESHOLD: int = 1000     # 高消费客人阈值
    TOP_GUESTS_LIMIT: int = 5            # 消费排行榜人数
    UPCOMING_CHECKIN_DAYS: int = 7       # 预抵窗口（天）
    IDLE_ROOM_MONTHS: int = 6            # 闲置房间回溯（月）

    model_config = ConfigDict(env_file=".env", case_sensitive=True)


# 全局设置实例
settings = Settings()
