"""数据库模型模块

定义所有 SQLAlchemy ORM 模型
"""

from ..database.connection import Base
from .enums import SizeEnum, SizeTypeEnum, OrderStatus, MANUAL_CUTTING_ID
from .admin import Admin
from .cutting_record import CuttingRecord, CuttingSizeBreakdown
from .manufacturing_order import ManufacturingOrder
from .qr_product import QRProduct

__all__ = [
    "Base",
    "SizeEnum",
    "SizeTypeEnum",
    "OrderStatus",
    "MANUAL_CUTTING_ID",
    "Admin",
    "CuttingRecord",
    "CuttingSizeBreakdown",
    "ManufacturingOrder",
    "QRProduct",
]
