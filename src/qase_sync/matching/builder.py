"""匹配策略工厂"""

from qase_sync.core.exceptions import ConfigError
from qase_sync.matching.base import StepMatcher
from qase_sync.matching.strategies import ExactMatcher, NormalizedMatcher


def build_matcher(strategy: str = "exact") -> StepMatcher:
    """根据配置中的策略名构建匹配器"""
    match strategy:
        case "exact":
            return ExactMatcher()
        case "normalized":
            return NormalizedMatcher()
        case _:
            raise ConfigError(f"未知匹配策略: {strategy}")
