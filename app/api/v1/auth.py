"""认证API路由"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from ... import crud, schemas
from ...auth import get_current_admin
from ...database.connection import get_db
from ...security import create_access_token

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=schemas.Token)
def login(credentials: schemas.LoginRequest, db: Session = Depends(get_db)):
    """管理员登录，返回访问令牌"""
    admin = crud.authenticate_admin(db, credentials.username, credentials.password)
    if not admin:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return {"access_token": create_access_token(admin.username), "token_type": "bearer"}


@router.get("/me", response_model=schemas.AdminRead)
def read_current_admin(admin=Depends(get_current_admin)):
    return admin
