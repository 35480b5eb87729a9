"""自定义异常定义"""


class QaseSyncError(Exception):
    """qase-sync 基础异常"""


class ConfigError(QaseSyncError):
    """配置加载或校验错误"""


class ReportError(QaseSyncError):
    """执行报告读取错误"""

    def __init__(self, message: str, file_path: str | None = None):
        super().__init__(message)
        self.file_path = file_path


class ReportParseError(ReportError):
    """报告不可读或不是合法 JSON"""


class ReportSchemaError(ReportError):
    """报告结构不符合预期（缺少 run.executions 等）"""


class QaseAPIError(QaseSyncError):
    """Qase API 调用错误"""

    def __init__(self, message: str, status_code: int | None = None, response_body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body
