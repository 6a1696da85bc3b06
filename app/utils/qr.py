"""二维码生成工具

二维码内容为竖线分隔的字符串：编号|品名|颜色|尺码|数量，扫码端按位置解析即可。
"""

import io

import qrcode

from .. import models


def qr_payload(product: models.QRProduct) -> str:
    fields = [
        product.manufacturing_id,
        product.product_name,
        product.color or "",
        product.size or "",
        str(product.quantity),
    ]
    return "|".join(fields)


def render_qr_png(payload: str) -> bytes:
    """将内容编码为二维码，返回 PNG 字节"""
    img = qrcode.make(payload)
    buffer = io.BytesIO()
    img.save(buffer)
    return buffer.getvalue()
