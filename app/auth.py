"""认证模块

该模块提供 FastAPI 依赖：从 Authorization 头解析 Bearer 令牌并加载管理员。
AUTH_REQUIRED 关闭时，库存接口不校验令牌。
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from . import crud
from .config.settings import settings
from .database.connection import get_db
from .security import decode_access_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
):
    """要求请求携带有效的管理员令牌"""
    if credentials is None:
        logger.warning("Authentication failed: no token provided")
        raise HTTPException(status_code=401, detail="Authentication required")

    username = decode_access_token(credentials.credentials)
    if username is None:
        raise HTTPException(status_code=401, detail="Invalid token")

    admin = crud.get_admin_by_username(db, username)
    if not admin:
        logger.warning("Authentication failed: admin %s not found", username)
        raise HTTPException(status_code=401, detail="User not found")
    return admin


def require_admin_if_enabled(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
):
    """AUTH_REQUIRED 为 True 时等同于 get_current_admin"""
    if not settings.AUTH_REQUIRED:
        return None
    return get_current_admin(credentials, db)
