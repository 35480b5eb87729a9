"""结果发布协议 / 基类"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from qase_sync.client.qase import QaseClient
from qase_sync.core.logging import get_logger
from qase_sync.schema.result import RunResult

logger = get_logger(__name__)


class RunPublisher(ABC):
    """
    创建 Qase 测试运行并提交结果

    incremental 为 True 的实现每算出一条结果就提交；
    否则由调用方收集全部结果后调用一次 submit_results。
    """

    incremental: bool = False

    def __init__(self, client: QaseClient):
        self.client = client

    async def create_run(self, title: str, case_ids: Sequence[int]) -> int:
        run_id = await self.client.create_run(title, case_ids)
        logger.info(f"已创建测试运行 #{run_id} \"{title}\"（{len(case_ids)} 个用例）")
        return run_id

    @abstractmethod
    async def submit_results(self, run_id: int, results: Sequence[RunResult]) -> None:
        """提交结果，任何一次失败都会抛出 QaseAPIError 并中止剩余提交"""
