"""裁剪记录模型定义"""

from sqlalchemy import Column, Integer, String, DateTime, Float, Text, ForeignKey, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database.connection import Base


class CuttingRecord(Base):
    """裁剪记录表"""
    __tablename__ = "cutting_records"

    id = Column(Integer, primary_key=True, index=True)
    # 业务编号，例如 CUT0001
    cutting_id = Column(String(32), unique=True, nullable=False, index=True)
    product_id = Column(String(64), nullable=True)
    fabric_type = Column(String(255), nullable=False)
    fabric_color = Column(String(255), nullable=False)
    product_name = Column(String(255), nullable=False)
    pieces_count = Column(Integer, nullable=False)
    # 单片尺寸（米）
    piece_length = Column(Float, nullable=False)
    piece_width = Column(Float, nullable=False)
    total_square_meters_used = Column(Float, nullable=False, default=0)
    size_type = Column(String(16), nullable=False, default="Mixed")
    cutting_master = Column(String(255), nullable=False)
    cutting_given_to = Column(String(255), nullable=True)
    # 裁缝每件工价
    tailor_item_per_piece = Column(Float, nullable=False, default=0)
    date = Column(String(32), nullable=True)
    time = Column(String(32), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    size_breakdown = relationship(
        "CuttingSizeBreakdown",
        back_populates="cutting_record",
        order_by="CuttingSizeBreakdown.position",
        cascade="all, delete-orphan",
    )

    @property
    def pieces_remaining(self) -> int:
        return sum(entry.quantity for entry in self.size_breakdown)


class CuttingSizeBreakdown(Base):
    """裁剪记录的尺码明细（尺码台账）

    original_quantity 为裁剪时的数量，quantity 为尚未分配给加工单的剩余数量
    """
    __tablename__ = "cutting_size_breakdowns"
    __table_args__ = (
        UniqueConstraint("cutting_record_id", "size", name="uq_breakdown_record_size"),
        CheckConstraint("quantity >= 0", name="ck_breakdown_quantity_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    cutting_record_id = Column(Integer, ForeignKey("cutting_records.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False, default=0)  # 保持录入顺序
    size = Column(String(8), nullable=False)
    original_quantity = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)

    cutting_record = relationship("CuttingRecord", back_populates="size_breakdown")
