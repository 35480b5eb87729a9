"""同步流水线内部数据模型

所有对象只在一次同步过程中存在，不做持久化。
"""

from dataclasses import dataclass, field
from typing import Literal

Status = Literal["passed", "failed"]


@dataclass(frozen=True)
class AssertionOutcome:
    """报告中的单条断言结果，error_message 为 None 表示通过"""

    name: str
    error_message: str | None = None

    @property
    def passed(self) -> bool:
        return self.error_message is None


@dataclass(frozen=True)
class Execution:
    """报告中的一次请求执行"""

    name: str
    assertions: tuple[AssertionOutcome, ...] = ()


@dataclass
class StepVerdict:
    """Qase 步骤与本地断言比对后的结果"""

    position: int
    action: str
    expected_result: str
    status: Status


@dataclass
class RunResult:
    """单个 Execution 的提交记录"""

    title: str
    case_id: int
    status: Status
    comment: str
    steps: list[StepVerdict] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.status == "passed"


@dataclass
class SyncSummary:
    """一次同步的汇总"""

    run_id: int | None
    results: list[RunResult] = field(default_factory=list)
    skipped: int = 0

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed
