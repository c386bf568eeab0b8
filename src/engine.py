"""Turn raw text into descriptive statistics and display fields."""

import logging
import math
from dataclasses import dataclass

from src.config import Settings
from src.formatting import format_mode, format_number, round_value
from src.parsing import parse_numbers
from src.stats import VarianceMode, mean, median, mode, std_dev, value_range, variance

logger = logging.getLogger(__name__)

# Display order of the six output fields
FIELDS = ("mean", "median", "mode", "range", "variance", "std_dev")

# Notes for fields that are not finite numbers
UNDEFINED_FOR_SINGLE_VALUE = "undefined for a single value"
OVERFLOWED = "overflowed"


@dataclass(frozen=True)
class StatisticsResult:
    count: int
    variance_mode: VarianceMode
    mean: float
    median: float
    mode: tuple[float, ...] | None
    range: float
    variance: float
    std_dev: float


@dataclass(frozen=True)
class EmptyResult:
    """No numbers were found in the input."""


def calculate(
    text: str, variance_mode: VarianceMode = VarianceMode.POPULATION
) -> StatisticsResult | EmptyResult:
    """Parse text and compute all six statistics.

    Returns EmptyResult when the text holds no finite numbers. Non-finite
    results (sample variance of a single value) are kept as NaN so callers
    can tell them apart from real values.
    """
    numbers = parse_numbers(text)
    if not numbers:
        logger.debug("No numbers in input; returning empty result")
        return EmptyResult()

    result = StatisticsResult(
        count=len(numbers),
        variance_mode=variance_mode,
        mean=mean(numbers),
        median=median(numbers),
        mode=mode(numbers),
        range=value_range(numbers),
        variance=variance(numbers, variance_mode),
        std_dev=std_dev(numbers, variance_mode),
    )
    unusable = [name for name in FIELDS if name != "mode" and not is_usable(getattr(result, name))]
    if unusable:
        logger.warning("Not a finite number (%s): %s", unusable_reason(result), ", ".join(unusable))
    return result


def is_usable(value: float) -> bool:
    return math.isfinite(value)


def unusable_reason(result: StatisticsResult) -> str:
    """Explain why a field of result is not a finite number."""
    if result.variance_mode is VarianceMode.SAMPLE and result.count == 1:
        return UNDEFINED_FOR_SINGLE_VALUE
    return OVERFLOWED


def render(
    outcome: StatisticsResult | EmptyResult, settings: Settings | None = None
) -> dict[str, str]:
    """Build the display string for each of the six fields, in FIELDS order."""
    settings = settings or Settings()
    if isinstance(outcome, EmptyResult):
        return {name: settings.empty_placeholder for name in FIELDS}

    display = {}
    for name in FIELDS:
        if name == "mode":
            display[name] = format_mode(outcome.mode, settings.no_mode_label)
        else:
            value = getattr(outcome, name)
            display[name] = format_number(round_value(value, settings.digits))
    return display
