"""管理员数据操作"""

import logging
from datetime import datetime

from sqlalchemy.orm import Session
from .. import models
from ..security import get_password_hash, verify_password

logger = logging.getLogger(__name__)


def create_admin(db: Session, username: str, password: str, name: str = None):
    """创建管理员账户"""
    hashed = get_password_hash(password)
    db_admin = models.Admin(username=username, hashed_password=hashed, name=name)
    db.add(db_admin)
    db.commit()
    db.refresh(db_admin)
    return db_admin


def get_admin_by_username(db: Session, username: str):
    """根据用户名获取管理员"""
    return db.query(models.Admin).filter(models.Admin.username == username).first()


def set_admin_password(db: Session, admin: models.Admin, password: str, name: str = None):
    """重置管理员密码"""
    admin.hashed_password = get_password_hash(password)
    if name is not None:
        admin.name = name
    db.commit()
    db.refresh(admin)
    return admin


def authenticate_admin(db: Session, username: str, password: str):
    """校验管理员凭据，成功返回管理员对象，否则返回 None"""
    admin = get_admin_by_username(db, username)
    if not admin or not verify_password(password, admin.hashed_password):
        logger.warning("Login failed for %s", username)
        return None
    admin.last_login_at = datetime.utcnow()
    db.commit()
    db.refresh(admin)
    return admin


def ensure_default_admin(db: Session, username: str, password: str):
    """启动时确保存在默认管理员"""
    admin = get_admin_by_username(db, username)
    if admin:
        return admin
    return create_admin(db, username, password, name="Administrator")
