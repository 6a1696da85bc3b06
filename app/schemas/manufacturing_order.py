"""加工单数据结构定义

定义加工单相关的Pydantic模型
"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from ..models.enums import SizeEnum, OrderStatus
from .qr_product import QRProductRead


class ManufacturingOrderCreate(BaseModel):
    """创建加工单时的模型

    未提供 manufacturing_id 时自动分配 MFG 编号；
    布料、颜色、品名、单价未提供时取自裁剪记录
    """
    manufacturing_id: Optional[str] = None
    cutting_id: str
    size: SizeEnum
    quantity: int
    tailor_name: str
    fabric_type: Optional[str] = None
    fabric_color: Optional[str] = None
    product_name: Optional[str] = None
    price_per_piece: Optional[float] = None
    total_amount: Optional[float] = None
    date_of_receive: Optional[str] = None
    priority: str = "Normal"
    notes: Optional[str] = None


class ManufacturingOrderUpdate(BaseModel):
    """更新加工单时的模型

    尺码、数量与裁剪编号创建后不可修改；status 变更走状态流转
    """
    fabric_type: Optional[str] = None
    fabric_color: Optional[str] = None
    product_name: Optional[str] = None
    tailor_name: Optional[str] = None
    price_per_piece: Optional[float] = None
    quantity_received: Optional[int] = None
    items_received: Optional[int] = None
    total_price: Optional[float] = None
    date_of_receive: Optional[str] = None
    priority: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[OrderStatus] = None


class StatusUpdate(BaseModel):
    """加工单状态变更"""
    status: OrderStatus


class ManufacturingOrderRead(BaseModel):
    """读取加工单时的模型"""
    id: int
    manufacturing_id: str
    cutting_id: str
    fabric_type: Optional[str] = None
    fabric_color: Optional[str] = None
    product_name: str
    size: str
    quantity: int
    tailor_name: str
    price_per_piece: float
    total_amount: float
    quantity_received: int
    items_received: int
    total_price: float
    date_of_receive: Optional[str] = None
    priority: str
    status: OrderStatus
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class StatusChangeResponse(BaseModel):
    """状态变更结果，流转到 Completed 时附带生成的二维码成品"""
    manufacturing_order: ManufacturingOrderRead
    qr_product: Optional[QRProductRead] = None
