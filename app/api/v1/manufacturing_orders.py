"""加工单API路由

定义加工单创建、状态流转与删除相关的API端点
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from ... import crud, schemas
from ...database.connection import get_db
from ...models.enums import OrderStatus

router = APIRouter(prefix="/manufacturing-orders", tags=["manufacturing-orders"])


@router.get("/", response_model=List[schemas.ManufacturingOrderRead])
def list_manufacturing_orders(
    status: Optional[OrderStatus] = Query(None, description="按状态筛选"),
    cutting_id: Optional[str] = Query(None, description="按裁剪编号筛选"),
    include_deleted: bool = Query(False, description="是否包含已软删除的加工单"),
    db: Session = Depends(get_db),
):
    """获取加工单列表"""
    return crud.list_manufacturing_orders(db, status=status, cutting_id=cutting_id, include_deleted=include_deleted)


@router.get("/next-id")
def get_next_manufacturing_id(db: Session = Depends(get_db)):
    """预览下一个 MFG 编号"""
    return {"next_id": crud.next_manufacturing_id(db)}


@router.post("/", response_model=schemas.ManufacturingOrderRead, status_code=201)
def create_manufacturing_order(order: schemas.ManufacturingOrderCreate, db: Session = Depends(get_db)):
    """创建加工单并扣减裁剪记录的尺码数量"""
    return crud.create_manufacturing_order(db, order)


@router.get("/{manufacturing_id}", response_model=schemas.ManufacturingOrderRead)
def read_manufacturing_order(manufacturing_id: str, db: Session = Depends(get_db)):
    db_order = crud.get_manufacturing_order(db, manufacturing_id)
    if not db_order:
        raise HTTPException(status_code=404, detail="Manufacturing order not found")
    return db_order


@router.put("/{manufacturing_id}", response_model=schemas.ManufacturingOrderRead)
def update_manufacturing_order(
    manufacturing_id: str,
    order_update: schemas.ManufacturingOrderUpdate,
    db: Session = Depends(get_db),
):
    """更新加工单"""
    return crud.update_manufacturing_order(db, manufacturing_id, order_update)


@router.put("/{manufacturing_id}/status", response_model=schemas.StatusChangeResponse)
def change_manufacturing_order_status(
    manufacturing_id: str,
    status_update: schemas.StatusUpdate,
    db: Session = Depends(get_db),
):
    """变更加工单状态，完成时生成二维码成品"""
    db_order, qr_product = crud.change_status(db, manufacturing_id, status_update.status)
    return {"manufacturing_order": db_order, "qr_product": qr_product}


@router.delete("/{manufacturing_id}")
def delete_manufacturing_order(manufacturing_id: str, db: Session = Depends(get_db)):
    """彻底删除加工单及其二维码成品"""
    if not crud.delete_manufacturing_order(db, manufacturing_id):
        raise HTTPException(status_code=404, detail="Manufacturing order not found")
    return {"message": "Manufacturing order deleted successfully"}
