"""匹配策略：exact, normalized"""

import re

from qase_sync.matching.base import StepMatcher

_WHITESPACE = re.compile(r"\s+")


class ExactMatcher(StepMatcher):
    """反转义后完全相等"""

    name = "exact"

    def matches(self, assertion_name: str, expected_result: str) -> bool:
        return assertion_name == expected_result


class NormalizedMatcher(StepMatcher):
    """忽略大小写、首尾空白及连续空白差异"""

    name = "normalized"

    @staticmethod
    def normalize(text: str) -> str:
        return _WHITESPACE.sub(" ", text).strip().casefold()

    def matches(self, assertion_name: str, expected_result: str) -> bool:
        return self.normalize(assertion_name) == self.normalize(expected_result)
