"""尺码台账

记录每条裁剪记录中各尺码尚未分配给加工单的剩余件数。
- reserve: 创建加工单时按尺码扣减，采用条件更新（剩余 >= 需求才扣减），避免并发超分配
- available_sizes: 以裁剪原始数量减去已有加工单数量，得到各尺码可分配数量
剩余数量为 0 的尺码保留在台账中，不会被删除。
"""

import logging
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from .. import models
from .errors import InsufficientQuantityError, ValidationError

logger = logging.getLogger(__name__)


def remaining_quantity(db: Session, cutting_record: models.CuttingRecord, size: str) -> int:
    """查询某尺码当前剩余数量，尺码不存在时返回 0"""
    value = (
        db.query(models.CuttingSizeBreakdown.quantity)
        .filter(
            models.CuttingSizeBreakdown.cutting_record_id == cutting_record.id,
            models.CuttingSizeBreakdown.size == size,
        )
        .scalar()
    )
    return value or 0


def reserve(db: Session, cutting_record: models.CuttingRecord, size: str, quantity: int) -> None:
    """从裁剪记录中按尺码扣减数量（不提交事务）

    数量不足或尺码不存在时抛出 InsufficientQuantityError，台账保持不变
    """
    if quantity <= 0:
        raise ValidationError("Quantity must be greater than 0")

    breakdown = models.CuttingSizeBreakdown
    affected = (
        db.query(breakdown)
        .filter(
            breakdown.cutting_record_id == cutting_record.id,
            breakdown.size == size,
            breakdown.quantity >= quantity,
        )
        .update({breakdown.quantity: breakdown.quantity - quantity}, synchronize_session=False)
    )
    if affected != 1:
        available = remaining_quantity(db, cutting_record, size)
        logger.info(
            "Rejected reservation on %s: size=%s requested=%s available=%s",
            cutting_record.cutting_id, size, quantity, available,
        )
        raise InsufficientQuantityError(size, quantity, available)

    # 条件更新绕过了会话中的对象，需让已加载的明细重新读取
    for entry in cutting_record.size_breakdown:
        db.expire(entry)
    logger.info("Reserved %s x %s from %s", quantity, size, cutting_record.cutting_id)


def allocated_by_size(db: Session, cutting_id: str) -> dict:
    """统计引用该裁剪记录的所有加工单按尺码的数量合计"""
    rows = (
        db.query(models.ManufacturingOrder.size, func.sum(models.ManufacturingOrder.quantity))
        .filter(models.ManufacturingOrder.cutting_id == cutting_id)
        .group_by(models.ManufacturingOrder.size)
        .all()
    )
    return {size: int(total or 0) for size, total in rows}


def available_sizes(db: Session, cutting_record: models.CuttingRecord) -> List[dict]:
    """各尺码的可分配数量：原始数量 - 已分配数量"""
    allocated = allocated_by_size(db, cutting_record.cutting_id)
    result = []
    for entry in cutting_record.size_breakdown:
        used = allocated.get(entry.size, 0)
        result.append({
            "size": entry.size,
            "original_quantity": entry.original_quantity,
            "allocated": used,
            "remaining_quantity": entry.original_quantity - used,
        })
    return result
