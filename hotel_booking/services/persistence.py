"""
写入提交
存储层拒绝的写入（唯一键、外键、非空、CHECK）回滚后以 ValueError 抛出
"""
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def commit_or_reject(db: Session, action: str) -> None:
    """提交当前会话；约束冲突时回滚并抛出 ValueError"""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"{action} rejected by store: {e.orig}")
        raise ValueError(f"{action}失败: {e.orig}") from e
