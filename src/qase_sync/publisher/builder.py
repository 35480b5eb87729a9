"""发布器工厂"""

from qase_sync.client.qase import QaseClient
from qase_sync.core.exceptions import ConfigError
from qase_sync.publisher.base import RunPublisher
from qase_sync.publisher.qase_publishers import BatchPublisher, PerCasePublisher


def build_publisher(submit_mode: str, client: QaseClient) -> RunPublisher:
    """根据 qase.submit_mode 选择提交方式"""
    match submit_mode:
        case "per_case":
            return PerCasePublisher(client)
        case "batch":
            return BatchPublisher(client)
        case _:
            raise ConfigError(f"未知提交方式: {submit_mode}")
