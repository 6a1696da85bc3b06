"""二维码成品模型定义"""

from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func
from ..database.connection import Base
from .enums import MANUAL_CUTTING_ID


class QRProduct(Base):
    """二维码成品表

    加工单完成时自动生成，或由用户手工录入（cutting_id 为 MANUAL）
    """
    __tablename__ = "qr_products"

    id = Column(Integer, primary_key=True, index=True)
    manufacturing_id = Column(String(32), unique=True, nullable=False, index=True)
    product_id = Column(String(64), nullable=True)
    cutting_id = Column(String(32), nullable=True)
    product_name = Column(String(255), nullable=False)
    fabric_type = Column(String(255), nullable=True)
    color = Column(String(255), nullable=True)
    size = Column(String(8), nullable=True)
    quantity = Column(Integer, nullable=False)
    tailor_name = Column(String(255), nullable=True)
    generated_date = Column(String(32), nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    @property
    def is_manual(self) -> bool:
        return self.cutting_id == MANUAL_CUTTING_ID
