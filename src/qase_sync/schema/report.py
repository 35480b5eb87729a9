"""Postman 执行报告 Pydantic 模型

只描述同步所需的字段：run.executions[].requestExecuted.name 与 tests[]，其余字段忽略。
"""

from pydantic import BaseModel, ConfigDict, Field


class ReportErrorInfo(BaseModel):
    """断言失败信息"""

    message: str | None = ""


class ReportAssertion(BaseModel):
    """单条断言（Postman 中的 pm.test）"""

    name: str
    error: ReportErrorInfo | None = None


class RequestExecuted(BaseModel):
    """被执行的请求"""

    name: str


class ReportExecution(BaseModel):
    """一次请求执行"""

    model_config = ConfigDict(populate_by_name=True)

    request_executed: RequestExecuted = Field(alias="requestExecuted")
    tests: list[ReportAssertion] | None = None


class ReportRun(BaseModel):
    executions: list[ReportExecution]


class PostmanReport(BaseModel):
    """报告根模型"""

    run: ReportRun
