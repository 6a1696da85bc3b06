"""工具函数模块

包含一些常用的工具函数
"""

from datetime import date
from typing import Optional


def calculate_square_meters(pieces_count: int, piece_length: float, piece_width: float) -> float:
    """计算裁剪用布面积（平方米）

    公式：片数 × 单片长 × 单片宽
    """
    return round(pieces_count * piece_length * piece_width, 4)


def calculate_total_price(items_received: Optional[int], quantity_received: Optional[int], price_per_piece: Optional[float]) -> float:
    """根据已收件数计算加工费：优先使用 items_received，其次 quantity_received"""
    items = items_received or quantity_received or 0
    return items * (price_per_piece or 0)


def today_str() -> str:
    """当天日期，格式 YYYY-MM-DD"""
    return date.today().isoformat()
