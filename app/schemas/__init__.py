from .auth import LoginRequest, Token, AdminRead
from .cutting_record import (
    SizeBreakdownItem,
    SizeBreakdownRead,
    AvailableSize,
    CuttingRecordCreate,
    CuttingRecordUpdate,
    CuttingRecordRead,
)
from .qr_product import ManualQRProductCreate, QRProductRead
from .manufacturing_order import (
    ManufacturingOrderCreate,
    ManufacturingOrderUpdate,
    ManufacturingOrderRead,
    StatusUpdate,
    StatusChangeResponse,
)

__all__ = [
    "LoginRequest",
    "Token",
    "AdminRead",
    "SizeBreakdownItem",
    "SizeBreakdownRead",
    "AvailableSize",
    "CuttingRecordCreate",
    "CuttingRecordUpdate",
    "CuttingRecordRead",
    "ManualQRProductCreate",
    "QRProductRead",
    "ManufacturingOrderCreate",
    "ManufacturingOrderUpdate",
    "ManufacturingOrderRead",
    "StatusUpdate",
    "StatusChangeResponse",
]
