"""二维码成品数据结构定义"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from ..models.enums import SizeEnum


class ManualQRProductCreate(BaseModel):
    """手工录入成品，编号自动分配为 MAN 编号"""
    product_name: str
    fabric_type: str
    color: str
    size: SizeEnum = SizeEnum.M
    quantity: int
    tailor_name: Optional[str] = None
    notes: Optional[str] = None


class QRProductRead(BaseModel):
    """读取二维码成品时的模型"""
    id: int
    manufacturing_id: str
    product_id: Optional[str] = None
    cutting_id: Optional[str] = None
    product_name: str
    fabric_type: Optional[str] = None
    color: Optional[str] = None
    size: Optional[str] = None
    quantity: int
    tailor_name: Optional[str] = None
    generated_date: str
    notes: Optional[str] = None
    is_manual: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
