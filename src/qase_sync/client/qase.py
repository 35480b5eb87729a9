"""Qase REST API 客户端"""

from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from qase_sync.client.base import BaseHTTPClient
from qase_sync.core.exceptions import QaseAPIError
from qase_sync.core.logging import get_logger
from qase_sync.schema.config import QaseConfig
from qase_sync.schema.qase import CaseDetail, CaseStep, RunCreated

logger = get_logger(__name__)


class QaseClient(BaseHTTPClient):
    """
    Qase API 客户端

    覆盖同步需要的四个接口：
    - POST /v1/run/{project}                 创建测试运行
    - GET  /v1/case/{project}/{id}           获取用例步骤
    - POST /v1/result/{project}/{run}        提交单条结果（v1）
    - POST /v2/{project}/run/{run}/results   批量提交结果（v2）
    """

    def __init__(self, config: QaseConfig, transport: httpx.AsyncBaseTransport | None = None):
        super().__init__(
            base_url=config.api_base,
            api_token=config.api_token,
            timeout=config.timeout,
            transport=transport,
        )
        self.project_code = config.project_code

    async def create_run(self, title: str, case_ids: Sequence[int]) -> int:
        """创建测试运行，返回 run id"""
        response = await self._request(
            "POST",
            f"/v1/run/{self.project_code}",
            json={"title": title, "cases": list(case_ids)},
        )
        try:
            return RunCreated.model_validate(response.get("result")).id
        except ValidationError as e:
            raise QaseAPIError(f"创建测试运行的响应缺少 result.id: {response}", response_body=str(response)) from e

    async def get_case_steps(self, case_id: int) -> list[CaseStep]:
        """获取用例定义的步骤，用例没有步骤时返回空列表"""
        response = await self._request("GET", f"/v1/case/{self.project_code}/{case_id}")
        try:
            detail = CaseDetail.model_validate(response.get("result") or {})
        except ValidationError as e:
            raise QaseAPIError(f"用例 {case_id} 的响应格式异常: {e}", response_body=str(response)) from e
        steps = detail.steps or []
        logger.debug(f"用例 {case_id} 共 {len(steps)} 个步骤")
        return steps

    async def create_result(self, run_id: int, payload: dict) -> dict:
        """v1：提交单个用例结果"""
        return await self._request("POST", f"/v1/result/{self.project_code}/{run_id}", json=payload)

    async def create_results_bulk(self, run_id: int, results: list[dict]) -> dict:
        """v2：一次提交全部用例结果"""
        return await self._request(
            "POST",
            f"/v2/{self.project_code}/run/{run_id}/results",
            json={"results": results},
        )
