"""二维码成品API路由"""

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session
from typing import List, Optional
from ... import crud, schemas
from ...database.connection import get_db
from ...utils.qr import qr_payload, render_qr_png

router = APIRouter(prefix="/qr-products", tags=["qr-products"])


@router.get("/", response_model=List[schemas.QRProductRead])
def list_qr_products(
    manual: Optional[bool] = Query(None, description="true 仅手工录入，false 仅加工单生成"),
    db: Session = Depends(get_db),
):
    return crud.list_qr_products(db, manual=manual)


@router.post("/manual", response_model=schemas.QRProductRead, status_code=201)
def create_manual_qr_product(product: schemas.ManualQRProductCreate, db: Session = Depends(get_db)):
    """手工录入成品"""
    return crud.create_manual_qr_product(db, product)


@router.get("/{manufacturing_id}", response_model=schemas.QRProductRead)
def read_qr_product(manufacturing_id: str, db: Session = Depends(get_db)):
    db_product = crud.get_qr_product(db, manufacturing_id)
    if not db_product:
        raise HTTPException(status_code=404, detail="QR product not found")
    return db_product


@router.get("/{manufacturing_id}/qr.png")
def read_qr_image(manufacturing_id: str, db: Session = Depends(get_db)):
    """成品二维码图片"""
    db_product = crud.get_qr_product(db, manufacturing_id)
    if not db_product:
        raise HTTPException(status_code=404, detail="QR product not found")
    return Response(content=render_qr_png(qr_payload(db_product)), media_type="image/png")


@router.delete("/{manufacturing_id}")
def delete_qr_product(manufacturing_id: str, db: Session = Depends(get_db)):
    """删除成品二维码"""
    if not crud.delete_qr_product(db, manufacturing_id):
        raise HTTPException(status_code=404, detail="QR product not found")
    return {"message": "QR product deleted successfully"}
