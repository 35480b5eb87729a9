"""Postman JSON 报告加载"""

import json
from pathlib import Path

from pydantic import ValidationError

from qase_sync.core.exceptions import ReportParseError, ReportSchemaError
from qase_sync.core.logging import get_logger
from qase_sync.schema.report import PostmanReport
from qase_sync.schema.result import AssertionOutcome, Execution

logger = get_logger(__name__)


def parse_report(raw: str | bytes, source: str | None = None) -> list[Execution]:
    """解析报告内容，按 run.executions 原顺序返回 Execution 列表"""
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ReportParseError(f"报告不是合法 JSON ({source or '<input>'}): {e}", file_path=source) from e

    try:
        report = PostmanReport.model_validate(data)
    except ValidationError as e:
        raise ReportSchemaError(
            f"报告结构不符合预期，需要 run.executions ({source or '<input>'}):\n{e}", file_path=source
        ) from e

    return [
        Execution(
            name=entry.request_executed.name,
            assertions=tuple(
                AssertionOutcome(
                    name=test.name,
                    error_message=(test.error.message or "") if test.error is not None else None,
                )
                for test in entry.tests or []
            ),
        )
        for entry in report.run.executions
    ]


def load_report(path: str | Path) -> list[Execution]:
    """读取报告文件并解析"""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ReportParseError(f"无法读取报告文件: {path} ({e})", file_path=str(path)) from e

    executions = parse_report(raw, source=str(path))
    logger.info(f"已加载报告 {path}: {len(executions)} 个请求执行")
    return executions
