"""管理员模型定义"""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from ..database.connection import Base


class Admin(Base):
    """管理员账户（登录后可访问库存接口）"""
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(64), unique=True, index=True, nullable=False)
    # pbkdf2_sha256 哈希，不保存明文
    hashed_password = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)
    last_login_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
