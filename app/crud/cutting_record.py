"""数据库操作（CRUD）- 裁剪记录相关

- create_cutting_record 会建立裁剪记录及其尺码台账，未提供编号时自动分配 CUT 编号
- 尺码台账创建后只会被加工单扣减，不能通过更新接口修改
"""

import logging

from sqlalchemy.orm import Session
from .. import models, schemas
from ..core.errors import ValidationError
from ..core.identifiers import CUTTING_PREFIX, next_identifier
from ..utils.helpers import calculate_square_meters
from .base import commit

logger = logging.getLogger(__name__)


def _validate_size_breakdown(pieces_count: int, breakdown) -> None:
    sizes = [item.size.value for item in breakdown]
    duplicates = sorted({size for size in sizes if sizes.count(size) > 1})
    if duplicates:
        raise ValidationError(f"Duplicate sizes in size breakdown: {', '.join(duplicates)}")
    total = sum(item.quantity for item in breakdown)
    if total > pieces_count:
        raise ValidationError(
            f"Size breakdown total ({total}) exceeds pieces count ({pieces_count})"
        )


def next_cutting_id(db: Session) -> str:
    return next_identifier(db, models.CuttingRecord.cutting_id, CUTTING_PREFIX)


def create_cutting_record(db: Session, record: schemas.CuttingRecordCreate):
    _validate_size_breakdown(record.pieces_count, record.size_breakdown)

    cutting_id = (record.cutting_id or "").strip() or next_cutting_id(db)
    square_meters = record.total_square_meters_used
    if square_meters is None:
        square_meters = calculate_square_meters(record.pieces_count, record.piece_length, record.piece_width)

    db_record = models.CuttingRecord(
        cutting_id=cutting_id,
        product_id=record.product_id,
        fabric_type=record.fabric_type,
        fabric_color=record.fabric_color,
        product_name=record.product_name,
        pieces_count=record.pieces_count,
        piece_length=record.piece_length,
        piece_width=record.piece_width,
        total_square_meters_used=square_meters,
        size_type=record.size_type.value,
        cutting_master=record.cutting_master,
        cutting_given_to=record.cutting_given_to or "",
        tailor_item_per_piece=record.tailor_item_per_piece,
        date=record.date,
        time=record.time,
        notes=record.notes or "",
    )
    for position, item in enumerate(record.size_breakdown):
        db_record.size_breakdown.append(models.CuttingSizeBreakdown(
            position=position,
            size=item.size.value,
            original_quantity=item.quantity,
            quantity=item.quantity,
        ))
    db.add(db_record)
    commit(db, "Cutting record with this ID already exists")
    db.refresh(db_record)
    logger.info("Created cutting record %s (%s pieces)", db_record.cutting_id, db_record.pieces_count)
    return db_record


def get_cutting_record(db: Session, cutting_id: str):
    """根据业务编号获取裁剪记录"""
    return db.query(models.CuttingRecord).filter(models.CuttingRecord.cutting_id == cutting_id).first()


def list_cutting_records(db: Session):
    """获取所有裁剪记录，按创建时间倒序"""
    return (
        db.query(models.CuttingRecord)
        .order_by(models.CuttingRecord.created_at.desc(), models.CuttingRecord.id.desc())
        .all()
    )


def update_cutting_record(db: Session, cutting_id: str, record_update: schemas.CuttingRecordUpdate):
    """更新裁剪记录，并重新计算用布面积"""
    db_record = get_cutting_record(db, cutting_id)
    if not db_record:
        return None

    update_data = record_update.dict(exclude_unset=True)
    pieces_count = update_data.get("pieces_count")
    if pieces_count is not None:
        cut_total = sum(entry.original_quantity for entry in db_record.size_breakdown)
        if cut_total > pieces_count:
            raise ValidationError(
                f"Size breakdown total ({cut_total}) exceeds pieces count ({pieces_count})"
            )

    for field, value in update_data.items():
        if value is None:
            continue
        if field == "size_type":
            value = value.value
        setattr(db_record, field, value)

    db_record.total_square_meters_used = calculate_square_meters(
        db_record.pieces_count, db_record.piece_length, db_record.piece_width
    )
    commit(db)
    db.refresh(db_record)
    return db_record


def delete_cutting_record(db: Session, cutting_id: str):
    """删除裁剪记录（已创建的加工单不受影响）"""
    db_record = get_cutting_record(db, cutting_id)
    if not db_record:
        return False
    db.delete(db_record)
    commit(db)
    logger.info("Deleted cutting record %s", cutting_id)
    return True
