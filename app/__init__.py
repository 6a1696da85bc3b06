"""服装库存管理系统

裁剪记录、加工单与二维码成品的 HTTP API
"""
