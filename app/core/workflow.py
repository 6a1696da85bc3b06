"""加工单状态流转

状态：Pending（初始）、Completed、QR Deleted、deleted
- Pending -> Completed：生成二维码成品（同一加工单只生成一条）
- Completed -> Pending：允许，已生成的二维码成品保留
- Pending/Completed -> QR Deleted：删除该加工单的二维码成品
- 任意状态 -> deleted：软删除，列表默认不再显示
QR Deleted 只能再流转到 deleted；deleted 不能再流转。相同状态的流转不做任何事。
本模块只修改会话中的对象，提交由调用方负责，保证状态与二维码记录在同一事务中写入。
"""

import logging
from datetime import date
from typing import Optional, Union

from sqlalchemy.orm import Session

from .. import models
from ..models.enums import OrderStatus
from .errors import InvalidTransitionError

logger = logging.getLogger(__name__)

# 加工单已不再持有有效二维码成品的状态
QR_RELEASED_STATUSES = {OrderStatus.QR_DELETED, OrderStatus.DELETED}


def check_transition(current: OrderStatus, target: OrderStatus) -> None:
    if current == target:
        return
    if current == OrderStatus.DELETED:
        raise InvalidTransitionError(current.value, target.value)
    if current == OrderStatus.QR_DELETED and target != OrderStatus.DELETED:
        raise InvalidTransitionError(current.value, target.value)


def find_qr_product(db: Session, manufacturing_id: str) -> Optional[models.QRProduct]:
    return db.query(models.QRProduct).filter(models.QRProduct.manufacturing_id == manufacturing_id).first()


def _order_qr_products(db: Session, order: models.ManufacturingOrder):
    """该加工单自动生成的二维码成品（同编号的手工成品不算）"""
    return db.query(models.QRProduct).filter(
        models.QRProduct.manufacturing_id == order.manufacturing_id,
        models.QRProduct.cutting_id == order.cutting_id,
    )


def find_order_qr_product(db: Session, order: models.ManufacturingOrder) -> Optional[models.QRProduct]:
    return _order_qr_products(db, order).first()


def ensure_qr_product(db: Session, order: models.ManufacturingOrder) -> models.QRProduct:
    """为已完成的加工单生成二维码成品，已存在时直接返回"""
    existing = find_order_qr_product(db, order)
    if existing:
        return existing

    today = date.today().isoformat()
    qr_product = models.QRProduct(
        product_id=order.manufacturing_id,
        manufacturing_id=order.manufacturing_id,
        cutting_id=order.cutting_id,
        product_name=order.product_name,
        fabric_type=order.fabric_type,
        color=order.fabric_color,
        size=order.size,
        quantity=order.quantity,
        tailor_name=order.tailor_name,
        generated_date=today,
        notes=f"Completed on {today}",
    )
    db.add(qr_product)
    logger.info("Generated QR product for %s", order.manufacturing_id)
    return qr_product


def remove_qr_products(db: Session, order: models.ManufacturingOrder) -> int:
    removed = _order_qr_products(db, order).delete(synchronize_session=False)
    if removed:
        logger.info("Removed %s QR product(s) for %s", removed, order.manufacturing_id)
    return removed


def apply_transition(
    db: Session,
    order: models.ManufacturingOrder,
    target: Union[OrderStatus, str],
) -> Optional[models.QRProduct]:
    """修改加工单状态并执行相应副作用

    流转到 Completed 时返回对应的二维码成品，其余情况返回 None
    """
    current = OrderStatus(order.status)
    target = OrderStatus(target)
    if current == target:
        return None

    check_transition(current, target)
    order.status = target.value
    logger.info("Manufacturing order %s: %s -> %s", order.manufacturing_id, current.value, target.value)

    if target == OrderStatus.COMPLETED:
        return ensure_qr_product(db, order)
    if target == OrderStatus.QR_DELETED:
        remove_qr_products(db, order)
    return None
