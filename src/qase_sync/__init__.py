"""qase-sync: 将 Postman 执行报告同步到 Qase 测试管理平台"""

__version__ = "0.1.0"
