"""结果汇总：本地断言 × Qase 步骤 → 步骤结论、整体结论与评论

规则：
- 每个步骤按顺序寻找匹配断言；找到时按断言是否出错给出 passed / failed，
  找不到时一律 failed（未观察到的期望不能视为通过）。
- 所有步骤通过才算整体通过，没有步骤时视为通过。
- 评论列出全部断言，与步骤匹配无关；未对应任何步骤的断言只出现在评论中。
"""

from collections.abc import Sequence

from qase_sync.matching import ExactMatcher, StepMatcher
from qase_sync.schema.qase import EXPECTED_RESULT_PLACEHOLDER, CaseStep
from qase_sync.schema.result import AssertionOutcome, Execution, RunResult, Status, StepVerdict

PASSED_MARK = "✅"
FAILED_MARK = "❌"


def reconcile_steps(
    steps: Sequence[CaseStep],
    assertions: Sequence[AssertionOutcome],
    matcher: StepMatcher | None = None,
) -> list[StepVerdict]:
    """为每个 Qase 步骤生成结论"""
    matcher = matcher or ExactMatcher()
    verdicts: list[StepVerdict] = []
    for index, step in enumerate(steps):
        assertion = matcher.find(step, assertions)
        status: Status = "passed" if assertion is not None and assertion.passed else "failed"
        verdicts.append(
            StepVerdict(
                position=step.effective_position(index),
                action=step.action or "",
                expected_result=step.expected_result or EXPECTED_RESULT_PLACEHOLDER,
                status=status,
            )
        )
    return verdicts


def overall_status(verdicts: Sequence[StepVerdict]) -> Status:
    return "passed" if all(v.status == "passed" for v in verdicts) else "failed"


def render_comment(assertions: Sequence[AssertionOutcome]) -> str:
    """每条断言一行：通过为 ✅ 名称，失败为 ❌ 名称: 错误信息"""
    lines = []
    for assertion in assertions:
        if assertion.passed:
            lines.append(f"{PASSED_MARK} {assertion.name}")
        else:
            lines.append(f"{FAILED_MARK} {assertion.name}: {assertion.error_message}")
    return "\n".join(lines)


def aggregate_execution(
    execution: Execution,
    case_id: int,
    steps: Sequence[CaseStep],
    matcher: StepMatcher | None = None,
) -> RunResult:
    """汇总单个 Execution 的提交记录"""
    verdicts = reconcile_steps(steps, execution.assertions, matcher)
    return RunResult(
        title=execution.name,
        case_id=case_id,
        status=overall_status(verdicts),
        comment=render_comment(execution.assertions),
        steps=verdicts,
    )
