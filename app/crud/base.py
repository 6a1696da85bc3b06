"""数据库提交辅助

统一把数据库异常转换为业务异常：
- IntegrityError（业务编号重复）-> ConflictError
- OperationalError（数据库不可用）-> DependencyError
"""

import logging

from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from ..core.errors import ConflictError, DependencyError

logger = logging.getLogger(__name__)


def commit(db: Session, conflict_message: str = "Record with this ID already exists") -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Integrity error on commit: %s", exc.orig)
        raise ConflictError(conflict_message) from exc
    except OperationalError as exc:
        db.rollback()
        logger.error("Database unavailable on commit: %s", exc.orig)
        raise DependencyError("Database unavailable, please retry") from exc
