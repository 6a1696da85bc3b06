"""裁剪记录数据结构定义

定义裁剪记录相关的Pydantic模型
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from ..models.enums import SizeEnum, SizeTypeEnum


class SizeBreakdownItem(BaseModel):
    """创建裁剪记录时的尺码明细"""
    size: SizeEnum
    quantity: int = Field(..., ge=0)


class SizeBreakdownRead(BaseModel):
    """尺码台账：original_quantity 为裁剪数量，quantity 为剩余可分配数量"""
    size: str
    quantity: int
    original_quantity: int

    class Config:
        from_attributes = True


class AvailableSize(BaseModel):
    """某尺码的可分配情况"""
    size: str
    original_quantity: int
    allocated: int
    remaining_quantity: int


class CuttingRecordBase(BaseModel):
    """裁剪记录基础模型"""
    product_id: Optional[str] = None
    fabric_type: str
    fabric_color: str
    product_name: str
    pieces_count: int = Field(..., ge=1)
    piece_length: float = Field(..., ge=0.1)
    piece_width: float = Field(..., ge=0.1)
    size_type: SizeTypeEnum = SizeTypeEnum.MIXED
    cutting_master: str
    cutting_given_to: Optional[str] = None
    tailor_item_per_piece: float = Field(0, ge=0)
    date: Optional[str] = None
    time: Optional[str] = None
    notes: Optional[str] = None


class CuttingRecordCreate(CuttingRecordBase):
    """创建裁剪记录时的模型，未提供 cutting_id 时自动分配 CUT 编号"""
    cutting_id: Optional[str] = None
    total_square_meters_used: Optional[float] = Field(None, ge=0)
    size_breakdown: List[SizeBreakdownItem] = []


class CuttingRecordUpdate(BaseModel):
    """更新裁剪记录时的模型（尺码明细创建后不可修改）"""
    product_id: Optional[str] = None
    fabric_type: Optional[str] = None
    fabric_color: Optional[str] = None
    product_name: Optional[str] = None
    pieces_count: Optional[int] = Field(None, ge=1)
    piece_length: Optional[float] = Field(None, ge=0.1)
    piece_width: Optional[float] = Field(None, ge=0.1)
    size_type: Optional[SizeTypeEnum] = None
    cutting_master: Optional[str] = None
    cutting_given_to: Optional[str] = None
    tailor_item_per_piece: Optional[float] = Field(None, ge=0)
    date: Optional[str] = None
    time: Optional[str] = None
    notes: Optional[str] = None


class CuttingRecordRead(CuttingRecordBase):
    """读取裁剪记录时的模型"""
    id: int
    cutting_id: str
    total_square_meters_used: float
    size_breakdown: List[SizeBreakdownRead] = []
    pieces_remaining: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
