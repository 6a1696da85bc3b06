"""FastAPI主应用入口

实现服装库存 RESTful API 服务，包含裁剪记录、加工单、二维码成品与管理员登录等功能模块
- 使用依赖注入管理数据库会话
- 业务异常统一由异常处理器转换为 JSON 响应
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from .api.v1 import (
    auth_router,
    cutting_records_router,
    manufacturing_orders_router,
    qr_products_router,
)
from .auth import require_admin_if_enabled
from .config.settings import settings
from .core.errors import InventoryError
from .database.connection import Base, SessionLocal, engine, get_db
from . import crud

logger = logging.getLogger(__name__)


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def init_db() -> None:
    """建表并确保默认管理员存在"""
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as db:
        crud.ensure_default_admin(db, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    try:
        init_db()
    except OperationalError as exc:
        logger.error("Could not initialise database on startup: %s", exc)
    logger.info("%s %s started", settings.APP_TITLE, settings.APP_VERSION)
    yield


# 创建FastAPI应用实例
app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)


@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(OperationalError)
async def database_error_handler(request: Request, exc: OperationalError):
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=503, content={"detail": "Database unavailable, please retry"})


# 挂载API路由；库存接口在 AUTH_REQUIRED 开启时需要令牌
record_dependencies = [Depends(require_admin_if_enabled)]
app.include_router(auth_router, prefix="/api")
app.include_router(cutting_records_router, prefix="/api", dependencies=record_dependencies)
app.include_router(manufacturing_orders_router, prefix="/api", dependencies=record_dependencies)
app.include_router(qr_products_router, prefix="/api", dependencies=record_dependencies)


# 健康检查端点
@app.get("/api/health")
def health_check(db: Session = Depends(get_db)):
    """检查服务与数据库连接状态"""
    try:
        db.execute(text("SELECT 1"))
        database = "reachable"
    except OperationalError:
        database = "unreachable"
    return {
        "status": "healthy" if database == "reachable" else "degraded",
        "database": database,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# 根路径 - 返回服务状态
@app.get("/")
def read_root():
    """返回服务运行状态"""
    return {"service": settings.APP_TITLE, "version": settings.APP_VERSION, "health": "/api/health"}
