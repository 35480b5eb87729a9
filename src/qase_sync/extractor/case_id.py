"""从请求名中提取 Qase 用例 ID

约定：请求名中包含 ``Qase:<数字>``（大小写不敏感），例如 ``Login Qase:501``。
"""

import re
from collections.abc import Iterable

from qase_sync.schema.result import Execution

CASE_ID_PATTERN = re.compile(r"Qase:(\d+)", re.IGNORECASE)


def extract_case_id(name: str) -> int | None:
    """返回请求名中的第一个用例 ID，不存在或非正整数时返回 None"""
    match = CASE_ID_PATTERN.search(name)
    if match is None:
        return None
    try:
        case_id = int(match.group(1))
    except ValueError:
        return None
    return case_id if case_id > 0 else None


def collect_case_ids(executions: Iterable[Execution]) -> list[int]:
    """去重后的用例 ID，保持首次出现的顺序"""
    seen: dict[int, None] = {}
    for execution in executions:
        case_id = extract_case_id(execution.name)
        if case_id is not None:
            seen.setdefault(case_id, None)
    return list(seen)
