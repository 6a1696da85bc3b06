"""裁剪记录API路由

定义裁剪记录与尺码可分配数量相关的API端点
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from ... import crud, schemas
from ...core import ledger
from ...database.connection import get_db

router = APIRouter(prefix="/cutting-records", tags=["cutting-records"])


@router.get("/", response_model=List[schemas.CuttingRecordRead])
def list_cutting_records(db: Session = Depends(get_db)):
    """获取裁剪记录列表（最新在前）"""
    return crud.list_cutting_records(db)


@router.get("/next-id")
def get_next_cutting_id(db: Session = Depends(get_db)):
    """预览下一个 CUT 编号"""
    return {"next_id": crud.next_cutting_id(db)}


@router.post("/", response_model=schemas.CuttingRecordRead, status_code=201)
def create_cutting_record(record: schemas.CuttingRecordCreate, db: Session = Depends(get_db)):
    """创建裁剪记录"""
    return crud.create_cutting_record(db, record)


@router.get("/{cutting_id}", response_model=schemas.CuttingRecordRead)
def read_cutting_record(cutting_id: str, db: Session = Depends(get_db)):
    db_record = crud.get_cutting_record(db, cutting_id)
    if not db_record:
        raise HTTPException(status_code=404, detail="Cutting record not found")
    return db_record


@router.get("/{cutting_id}/available-sizes", response_model=List[schemas.AvailableSize])
def read_available_sizes(cutting_id: str, db: Session = Depends(get_db)):
    """各尺码可分配给加工单的数量"""
    db_record = crud.get_cutting_record(db, cutting_id)
    if not db_record:
        raise HTTPException(status_code=404, detail="Cutting record not found")
    return ledger.available_sizes(db, db_record)


@router.put("/{cutting_id}", response_model=schemas.CuttingRecordRead)
def update_cutting_record(cutting_id: str, record_update: schemas.CuttingRecordUpdate, db: Session = Depends(get_db)):
    """更新裁剪记录"""
    db_record = crud.update_cutting_record(db, cutting_id, record_update)
    if not db_record:
        raise HTTPException(status_code=404, detail="Cutting record not found")
    return db_record


@router.delete("/{cutting_id}")
def delete_cutting_record(cutting_id: str, db: Session = Depends(get_db)):
    """删除裁剪记录"""
    if not crud.delete_cutting_record(db, cutting_id):
        raise HTTPException(status_code=404, detail="Cutting record not found")
    return {"message": "Cutting record deleted successfully"}
