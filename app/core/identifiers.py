"""业务编号分配

按前缀扫描已有编号，取最大数字后缀加一，生成 CUT0001、MFG0002、MAN0003 这类编号。
编号唯一性由数据库唯一约束兜底，冲突时写入会失败（见 crud.base.commit）。
"""

import logging
import re
from typing import Iterable, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

CUTTING_PREFIX = "CUT"
MANUFACTURING_PREFIX = "MFG"
MANUAL_PREFIX = "MAN"

ID_WIDTH = 4

_LEADING_DIGITS = re.compile(r"\d+")


def _suffix_number(identifier: str, prefix: str) -> int:
    """去掉前缀后解析数字部分，无法解析时按 0 处理"""
    match = _LEADING_DIGITS.match(identifier[len(prefix):])
    return int(match.group()) if match else 0


def format_identifier(prefix: str, number: int) -> str:
    return f"{prefix}{number:0{ID_WIDTH}d}"


def allocate_identifier(prefix: str, existing: Iterable[str]) -> str:
    """根据已有编号计算下一个编号

    >>> allocate_identifier("CUT", ["CUT0001", "CUT0003", "CUT0007"])
    'CUT0008'
    >>> allocate_identifier("MFG", [])
    'MFG0001'
    """
    numbers = [
        _suffix_number(identifier, prefix)
        for identifier in existing
        if identifier and identifier.startswith(prefix)
    ]
    return format_identifier(prefix, max(numbers, default=0) + 1)


def next_identifier_across(db: Session, columns: Sequence, prefix: str) -> str:
    """扫描多个编号列，返回下一个编号

    查询失败时不抛异常，回退到种子编号（prefix + 0001）
    """
    existing = []
    try:
        for column in columns:
            rows = db.query(column).filter(column.like(f"{prefix}%")).all()
            existing.extend(row[0] for row in rows)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("Could not list existing %s identifiers, falling back to seed: %s", prefix, exc)
        return format_identifier(prefix, 1)
    return allocate_identifier(prefix, existing)


def next_identifier(db: Session, column, prefix: str) -> str:
    """扫描单个编号列，返回下一个编号"""
    return next_identifier_across(db, [column], prefix)
