"""同步主流程"""

from datetime import datetime

from qase_sync.aggregator.reconcile import aggregate_execution
from qase_sync.client.qase import QaseClient
from qase_sync.core.logging import get_logger
from qase_sync.extractor.case_id import collect_case_ids, extract_case_id
from qase_sync.matching import build_matcher
from qase_sync.publisher import build_publisher
from qase_sync.report.loader import load_report
from qase_sync.schema.config import SyncConfig
from qase_sync.schema.result import RunResult, SyncSummary

logger = get_logger(__name__)


def render_run_title(template: str, now: datetime | None = None) -> str:
    """替换标题中的 {timestamp} 占位符"""
    if "{timestamp}" not in template:
        return template
    now = now or datetime.now()
    return template.replace("{timestamp}", now.strftime("%Y-%m-%d %H:%M:%S"))


class SyncEngine:
    """
    主编排器：加载报告 → 提取用例 ID → 创建运行 → 逐个比对并提交

    职责：
    - 按报告顺序串行处理，同一时刻只有一个请求在途
    - 根据 submit_mode 决定逐条提交还是最后批量提交
    - 任一错误直接向上抛出，不做局部恢复
    """

    def __init__(self, config: SyncConfig, client: QaseClient | None = None):
        self.config = config
        self.client = client or QaseClient(config.qase)
        self.publisher = build_publisher(config.qase.submit_mode, self.client)
        self.matcher = build_matcher(config.matching.strategy)

    async def run(self) -> SyncSummary:
        executions = load_report(self.config.report_path())
        case_ids = collect_case_ids(executions)

        if not case_ids:
            logger.warning("报告中没有任何包含 Qase:<ID> 的请求，跳过创建测试运行")
            return SyncSummary(run_id=None, skipped=len(executions))

        logger.debug(f"匹配策略: {self.matcher.name}，提交方式: {self.config.qase.submit_mode}")
        title = render_run_title(self.config.run.title)
        run_id = await self.publisher.create_run(title, case_ids)

        summary = SyncSummary(run_id=run_id)
        pending: list[RunResult] = []
        for execution in executions:
            case_id = extract_case_id(execution.name)
            if case_id is None:
                logger.debug(f"跳过未关联用例的请求: {execution.name}")
                summary.skipped += 1
                continue

            steps = await self.client.get_case_steps(case_id)
            result = aggregate_execution(execution, case_id, steps, self.matcher)
            logger.info(f"test: {execution.name} | Status: {result.status}")
            summary.results.append(result)

            if self.publisher.incremental:
                await self.publisher.submit_results(run_id, [result])
            else:
                pending.append(result)

        if not self.publisher.incremental:
            await self.publisher.submit_results(run_id, pending)

        return summary

    async def close(self) -> None:
        await self.client.close()
