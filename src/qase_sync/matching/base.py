"""步骤匹配协议 / 基类"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from qase_sync.schema.qase import CaseStep
from qase_sync.schema.result import AssertionOutcome
from qase_sync.utils.markdown import unescape_markdown


class StepMatcher(ABC):
    """在断言列表中为 Qase 步骤寻找对应断言，所有匹配策略必须实现 matches"""

    name: str = "base"

    @abstractmethod
    def matches(self, assertion_name: str, expected_result: str) -> bool:
        ...

    def find(self, step: CaseStep, assertions: Sequence[AssertionOutcome]) -> AssertionOutcome | None:
        """返回第一个匹配的断言（按断言顺序），没有 expected_result 的步骤不会匹配"""
        expected = unescape_markdown(step.expected_result)
        if expected is None:
            return None
        for assertion in assertions:
            if self.matches(assertion.name, expected):
                return assertion
        return None
