from qase_sync.matching.base import StepMatcher
from qase_sync.matching.builder import build_matcher
from qase_sync.matching.strategies import ExactMatcher, NormalizedMatcher

__all__ = ["StepMatcher", "ExactMatcher", "NormalizedMatcher", "build_matcher"]
