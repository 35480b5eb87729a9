"""Qase API 响应模型"""

from pydantic import BaseModel

EXPECTED_RESULT_PLACEHOLDER = "Expected result"


class CaseStep(BaseModel):
    """Qase 用例中定义的单个步骤"""

    position: int | None = None
    action: str | None = ""
    expected_result: str | None = None

    def effective_position(self, index: int) -> int:
        """position 缺失（或为 0）时使用序号 index + 1"""
        return self.position or index + 1


class CaseDetail(BaseModel):
    """GET /v1/case/{project}/{id} 中的 result"""

    steps: list[CaseStep] | None = None


class RunCreated(BaseModel):
    """POST /v1/run/{project} 中的 result"""

    id: int
