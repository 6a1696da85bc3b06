"""数据库操作（CRUD）- 二维码成品相关"""

import logging
from typing import Optional

from sqlalchemy.orm import Session
from .. import models, schemas
from ..core import workflow
from ..core.errors import ValidationError
from ..core.identifiers import MANUAL_PREFIX, next_identifier_across
from ..models.enums import MANUAL_CUTTING_ID, OrderStatus
from ..utils.helpers import today_str
from .base import commit
from .manufacturing_order import get_manufacturing_order

logger = logging.getLogger(__name__)


def next_manual_id(db: Session) -> str:
    """手工成品编号，同时扫描成品表与加工单表中的 MAN 编号"""
    return next_identifier_across(
        db,
        [models.QRProduct.manufacturing_id, models.ManufacturingOrder.manufacturing_id],
        MANUAL_PREFIX,
    )


def list_qr_products(db: Session, manual: Optional[bool] = None):
    """获取二维码成品列表，可按是否手工录入筛选"""
    query = db.query(models.QRProduct)
    if manual is True:
        query = query.filter(models.QRProduct.cutting_id == MANUAL_CUTTING_ID)
    elif manual is False:
        query = query.filter(
            (models.QRProduct.cutting_id != MANUAL_CUTTING_ID) | (models.QRProduct.cutting_id.is_(None))
        )
    return query.order_by(models.QRProduct.created_at.desc(), models.QRProduct.id.desc()).all()


def get_qr_product(db: Session, manufacturing_id: str):
    return workflow.find_qr_product(db, manufacturing_id)


def create_manual_qr_product(db: Session, product: schemas.ManualQRProductCreate):
    if product.quantity <= 0:
        raise ValidationError("Quantity must be greater than 0")

    manual_id = next_manual_id(db)
    db_product = models.QRProduct(
        product_id=manual_id,
        manufacturing_id=manual_id,
        cutting_id=MANUAL_CUTTING_ID,
        product_name=product.product_name.strip(),
        fabric_type=product.fabric_type.strip(),
        color=product.color.strip(),
        size=product.size.value,
        quantity=product.quantity,
        tailor_name=(product.tailor_name or "").strip() or "Manual Entry",
        generated_date=today_str(),
        notes=product.notes or "Manually added product",
    )
    db.add(db_product)
    commit(db, f"QR product {manual_id} already exists")
    db.refresh(db_product)
    logger.info("Created manual QR product %s", manual_id)
    return db_product


def delete_qr_product(db: Session, manufacturing_id: str):
    """删除二维码成品

    自动生成的成品：对应加工单仍处于 Pending/Completed 时，将其流转为 QR Deleted（同时删除成品）；
    手工成品或加工单已不存在时直接删除。已扣减的尺码数量不会恢复。
    """
    db_product = get_qr_product(db, manufacturing_id)
    if not db_product:
        return False

    order = None
    if not db_product.is_manual:
        order = get_manufacturing_order(db, manufacturing_id)
        if order is not None and order.cutting_id != db_product.cutting_id:
            order = None

    if order is not None and OrderStatus(order.status) not in workflow.QR_RELEASED_STATUSES:
        workflow.apply_transition(db, order, OrderStatus.QR_DELETED)
    else:
        db.delete(db_product)
    commit(db)
    logger.info("Deleted QR product %s", manufacturing_id)
    return True
