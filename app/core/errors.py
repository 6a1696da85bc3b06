"""业务异常定义

CRUD 与核心逻辑抛出这些异常，由 main.py 中注册的异常处理器统一转换为 HTTP 响应
"""

from typing import Optional


class InventoryError(Exception):
    """业务异常基类"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"detail": self.message}


class ValidationError(InventoryError):
    """请求内容不合法（数量不足、数量 <= 0 等）"""
    status_code = 400


class InsufficientQuantityError(ValidationError):
    """尺码台账中剩余数量不足"""

    def __init__(self, size: str, requested: int, available: int):
        super().__init__(
            f"Not enough quantity for size {size}. Available: {available}, Requested: {requested}"
        )
        self.size = size
        self.requested = requested
        self.available = available

    def to_dict(self) -> dict:
        return {
            "detail": self.message,
            "size": self.size,
            "requested": self.requested,
            "available": self.available,
        }


class NotFoundError(InventoryError):
    """引用的业务编号不存在"""
    status_code = 404

    def __init__(self, entity: str, identifier: Optional[str] = None):
        message = f"{entity} not found" if identifier is None else f"{entity} {identifier} not found"
        super().__init__(message)
        self.entity = entity
        self.identifier = identifier


class ConflictError(InventoryError):
    """业务编号冲突，调用方应重新分配编号后重试"""
    status_code = 409


class InvalidTransitionError(ConflictError):
    """加工单状态不允许的流转"""

    def __init__(self, current: str, target: str):
        super().__init__(f"Cannot change status from '{current}' to '{target}'")
        self.current = current
        self.target = target


class DependencyError(InventoryError):
    """数据库不可用，可稍后重试"""
    status_code = 503
