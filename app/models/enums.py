"""枚举定义

尺码与加工单状态的取值集合，模型、数据结构与工作流共用
"""

from enum import Enum


class SizeEnum(str, Enum):
    """尺码"""
    XXS = "XXS"
    XS = "XS"
    S = "S"
    M = "M"
    L = "L"
    XL = "XL"
    XXL = "XXL"


class SizeTypeEnum(str, Enum):
    """裁剪记录的尺码类型，Mixed 表示多尺码"""
    XXS = "XXS"
    XS = "XS"
    S = "S"
    M = "M"
    L = "L"
    XL = "XL"
    XXL = "XXL"
    MIXED = "Mixed"


class OrderStatus(str, Enum):
    """加工单状态"""
    PENDING = "Pending"
    COMPLETED = "Completed"
    QR_DELETED = "QR Deleted"
    DELETED = "deleted"


# 手工录入的二维码成品使用的裁剪编号
MANUAL_CUTTING_ID = "MANUAL"
