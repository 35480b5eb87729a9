from qase_sync.publisher.base import RunPublisher
from qase_sync.publisher.builder import build_publisher
from qase_sync.publisher.qase_publishers import BatchPublisher, PerCasePublisher, to_v1_payload, to_v2_payload

__all__ = [
    "RunPublisher",
    "PerCasePublisher",
    "BatchPublisher",
    "build_publisher",
    "to_v1_payload",
    "to_v2_payload",
]
