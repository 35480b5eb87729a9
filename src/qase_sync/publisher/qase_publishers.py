"""两种提交方式：per_case（API v1）与 batch（API v2）"""

from collections.abc import Sequence

from qase_sync.core.logging import get_logger
from qase_sync.publisher.base import RunPublisher
from qase_sync.schema.result import RunResult

logger = get_logger(__name__)


def to_v1_payload(result: RunResult) -> dict:
    """POST /v1/result 请求体"""
    return {
        "case_id": result.case_id,
        "status": result.status,
        "comment": result.comment,
        "steps": [
            {
                "position": step.position,
                "action": step.action,
                "expected_result": step.expected_result,
                "status": step.status,
            }
            for step in result.steps
        ],
    }


def to_v2_payload(result: RunResult) -> dict:
    """POST /v2/.../results 中 results[] 的单个元素"""
    return {
        "title": result.title,
        "testops_id": result.case_id,
        "execution": {"status": result.status},
        "fields": {"description": result.comment},
        "steps": [
            {
                "position": step.position,
                "data": {
                    "action": step.action,
                    "expected_result": step.expected_result,
                },
                "execution": {"status": step.status},
            }
            for step in result.steps
        ],
    }


class PerCasePublisher(RunPublisher):
    """每个用例一次请求"""

    incremental = True

    async def submit_results(self, run_id: int, results: Sequence[RunResult]) -> None:
        for result in results:
            payload = to_v1_payload(result)
            logger.debug(f"提交用例 {result.case_id}: {payload}")
            await self.client.create_result(run_id, payload)


class BatchPublisher(RunPublisher):
    """全部用例一次请求"""

    incremental = False

    async def submit_results(self, run_id: int, results: Sequence[RunResult]) -> None:
        if not results:
            logger.info("没有可提交的结果")
            return
        payload = [to_v2_payload(result) for result in results]
        logger.info(f"批量提交 {len(payload)} 条结果到测试运行 #{run_id}")
        response = await self.client.create_results_bulk(run_id, payload)
        logger.debug(f"批量提交响应: {response}")
