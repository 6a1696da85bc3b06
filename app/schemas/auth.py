"""认证数据结构定义"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class LoginRequest(BaseModel):
    """管理员登录"""
    username: str
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class AdminRead(BaseModel):
    id: int
    username: str
    name: Optional[str] = None
    last_login_at: Optional[datetime] = None

    class Config:
        from_attributes = True
