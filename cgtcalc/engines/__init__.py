"""Capital gains computation engines."""

from cgtcalc.engines.calculator import Calculator
from cgtcalc.engines.matching import (
    MatchingProcessor,
    bed_and_breakfast_rule,
    same_day_rule,
)
from cgtcalc.engines.result_builder import ResultBuilder
from cgtcalc.engines.section104 import Section104Pool, Section104Processor
from cgtcalc.engines.state import AssetProcessorState

__all__ = [
    "AssetProcessorState",
    "Calculator",
    "MatchingProcessor",
    "ResultBuilder",
    "Section104Pool",
    "Section104Processor",
    "bed_and_breakfast_rule",
    "same_day_rule",
]
