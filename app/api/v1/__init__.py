from .auth import router as auth_router
from .cutting_records import router as cutting_records_router
from .manufacturing_orders import router as manufacturing_orders_router
from .qr_products import router as qr_products_router

__all__ = ["auth_router", "cutting_records_router", "manufacturing_orders_router", "qr_products_router"]
