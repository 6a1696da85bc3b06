"""数据库操作（CRUD）- 加工单相关

- create_manufacturing_order 在同一事务中分配 MFG 编号、扣减尺码台账并写入加工单
- change_status 通过状态流转修改状态，二维码成品与状态在同一事务中提交
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session
from .. import models, schemas
from ..core import ledger, workflow
from ..core.errors import ConflictError, InventoryError, NotFoundError
from ..core.identifiers import MANUFACTURING_PREFIX, next_identifier
from ..models.enums import OrderStatus
from ..utils.helpers import calculate_total_price, today_str
from .base import commit
from .cutting_record import get_cutting_record

logger = logging.getLogger(__name__)


def next_manufacturing_id(db: Session) -> str:
    return next_identifier(db, models.ManufacturingOrder.manufacturing_id, MANUFACTURING_PREFIX)


def create_manufacturing_order(db: Session, order: schemas.ManufacturingOrderCreate):
    cutting_record = get_cutting_record(db, order.cutting_id)
    if not cutting_record:
        raise NotFoundError("Cutting record", order.cutting_id)

    manufacturing_id = (order.manufacturing_id or "").strip() or next_manufacturing_id(db)
    # 编号不能与已有二维码成品（包括手工成品）重复
    if workflow.find_qr_product(db, manufacturing_id):
        raise ConflictError(f"QR product {manufacturing_id} already exists")
    size = order.size.value

    try:
        ledger.reserve(db, cutting_record, size, order.quantity)
    except InventoryError:
        db.rollback()
        raise

    price_per_piece = order.price_per_piece
    if price_per_piece is None:
        price_per_piece = cutting_record.tailor_item_per_piece or 0
    total_amount = order.total_amount
    if total_amount is None:
        total_amount = order.quantity * price_per_piece

    db_order = models.ManufacturingOrder(
        manufacturing_id=manufacturing_id,
        cutting_id=cutting_record.cutting_id,
        fabric_type=order.fabric_type or cutting_record.fabric_type,
        fabric_color=order.fabric_color or cutting_record.fabric_color,
        product_name=order.product_name or cutting_record.product_name,
        size=size,
        quantity=order.quantity,
        tailor_name=order.tailor_name,
        price_per_piece=price_per_piece,
        total_amount=total_amount,
        quantity_received=0,
        items_received=0,
        total_price=0,
        date_of_receive=order.date_of_receive or today_str(),
        priority=order.priority or "Normal",
        status=OrderStatus.PENDING.value,
        notes=order.notes or "",
    )
    db.add(db_order)
    # 编号冲突时整体回滚，台账扣减一并撤销
    commit(db, f"Manufacturing order {manufacturing_id} already exists")
    db.refresh(db_order)
    logger.info(
        "Created manufacturing order %s: %s x %s from %s for %s",
        manufacturing_id, order.quantity, size, cutting_record.cutting_id, order.tailor_name,
    )
    return db_order


def get_manufacturing_order(db: Session, manufacturing_id: str):
    """根据业务编号获取加工单"""
    return (
        db.query(models.ManufacturingOrder)
        .filter(models.ManufacturingOrder.manufacturing_id == manufacturing_id)
        .first()
    )


def list_manufacturing_orders(
    db: Session,
    status: Optional[OrderStatus] = None,
    cutting_id: Optional[str] = None,
    include_deleted: bool = False,
):
    """获取加工单列表，默认不包含已软删除的加工单"""
    query = db.query(models.ManufacturingOrder)
    if status is not None:
        query = query.filter(models.ManufacturingOrder.status == OrderStatus(status).value)
    elif not include_deleted:
        query = query.filter(models.ManufacturingOrder.status != OrderStatus.DELETED.value)
    if cutting_id:
        query = query.filter(models.ManufacturingOrder.cutting_id == cutting_id)
    return query.order_by(models.ManufacturingOrder.created_at.desc(), models.ManufacturingOrder.id.desc()).all()


def _require_order(db: Session, manufacturing_id: str) -> models.ManufacturingOrder:
    db_order = get_manufacturing_order(db, manufacturing_id)
    if not db_order:
        raise NotFoundError("Manufacturing order", manufacturing_id)
    return db_order


def update_manufacturing_order(db: Session, manufacturing_id: str, order_update: schemas.ManufacturingOrderUpdate):
    """更新加工单字段，status 若提供则按状态流转处理"""
    db_order = _require_order(db, manufacturing_id)

    update_data = order_update.dict(exclude_unset=True)
    status = update_data.pop("status", None)
    for field, value in update_data.items():
        if value is None:
            continue
        setattr(db_order, field, value)

    # 未设置单价时沿用裁剪记录中的裁缝工价
    if "price_per_piece" not in update_data and not db_order.price_per_piece:
        cutting_record = get_cutting_record(db, db_order.cutting_id)
        if cutting_record and cutting_record.tailor_item_per_piece:
            db_order.price_per_piece = cutting_record.tailor_item_per_piece

    if update_data.get("total_price") is None:
        db_order.total_price = calculate_total_price(
            db_order.items_received, db_order.quantity_received, db_order.price_per_piece
        )

    try:
        if status is not None:
            workflow.apply_transition(db, db_order, status)
    except InventoryError:
        db.rollback()
        raise

    commit(db)
    db.refresh(db_order)
    return db_order


def change_status(db: Session, manufacturing_id: str, status: OrderStatus):
    """变更加工单状态，返回 (加工单, 二维码成品或 None)"""
    db_order = _require_order(db, manufacturing_id)
    try:
        workflow.apply_transition(db, db_order, status)
    except InventoryError:
        db.rollback()
        raise
    commit(db)
    db.refresh(db_order)

    qr_product = None
    if db_order.status == OrderStatus.COMPLETED.value:
        qr_product = workflow.find_order_qr_product(db, db_order)
    return db_order, qr_product


def delete_manufacturing_order(db: Session, manufacturing_id: str):
    """彻底删除加工单及其二维码成品，已扣减的尺码数量不会恢复"""
    db_order = get_manufacturing_order(db, manufacturing_id)
    if not db_order:
        return False
    workflow.remove_qr_products(db, db_order)
    db.delete(db_order)
    commit(db)
    logger.info("Deleted manufacturing order %s", manufacturing_id)
    return True
