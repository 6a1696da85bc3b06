"""加工单模型定义"""

from sqlalchemy import Column, Integer, String, DateTime, Float, Text
from sqlalchemy.sql import func
from ..database.connection import Base
from .enums import OrderStatus


class ManufacturingOrder(Base):
    """加工单表（将某裁剪记录中某一尺码的若干件分配给裁缝）"""
    __tablename__ = "manufacturing_orders"

    id = Column(Integer, primary_key=True, index=True)
    # 业务编号，例如 MFG0001
    manufacturing_id = Column(String(32), unique=True, nullable=False, index=True)
    # 按业务编号引用裁剪记录，不设外键
    cutting_id = Column(String(32), nullable=False, index=True)
    fabric_type = Column(String(255), nullable=True)
    fabric_color = Column(String(255), nullable=True)
    product_name = Column(String(255), nullable=False)
    size = Column(String(8), nullable=False)
    quantity = Column(Integer, nullable=False)
    tailor_name = Column(String(255), nullable=False)
    price_per_piece = Column(Float, nullable=False, default=0)
    total_amount = Column(Float, nullable=False, default=0)
    quantity_received = Column(Integer, nullable=False, default=0)
    items_received = Column(Integer, nullable=False, default=0)
    total_price = Column(Float, nullable=False, default=0)
    date_of_receive = Column(String(32), nullable=True)
    priority = Column(String(32), nullable=False, default="Normal")
    status = Column(String(32), nullable=False, default=OrderStatus.PENDING.value, index=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
