from .admin import (
    create_admin,
    get_admin_by_username,
    set_admin_password,
    authenticate_admin,
    ensure_default_admin,
)

from .cutting_record import (
    next_cutting_id,
    create_cutting_record,
    get_cutting_record,
    list_cutting_records,
    update_cutting_record,
    delete_cutting_record,
)

from .manufacturing_order import (
    next_manufacturing_id,
    create_manufacturing_order,
    get_manufacturing_order,
    list_manufacturing_orders,
    update_manufacturing_order,
    change_status,
    delete_manufacturing_order,
)

from .qr_product import (
    next_manual_id,
    list_qr_products,
    get_qr_product,
    create_manual_qr_product,
    delete_qr_product,
)

__all__ = [
    # Admin functions
    "create_admin",
    "get_admin_by_username",
    "set_admin_password",
    "authenticate_admin",
    "ensure_default_admin",

    # Cutting record functions
    "next_cutting_id",
    "create_cutting_record",
    "get_cutting_record",
    "list_cutting_records",
    "update_cutting_record",
    "delete_cutting_record",

    # Manufacturing order functions
    "next_manufacturing_id",
    "create_manufacturing_order",
    "get_manufacturing_order",
    "list_manufacturing_orders",
    "update_manufacturing_order",
    "change_status",
    "delete_manufacturing_order",

    # QR product functions
    "next_manual_id",
    "list_qr_products",
    "get_qr_product",
    "create_manual_qr_product",
    "delete_qr_product",
]
