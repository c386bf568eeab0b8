"""Descriptive statistics over lists of finite numbers."""

import enum
import math


class VarianceMode(enum.Enum):
    """Denominator used by variance and standard deviation."""

    POPULATION = "population"
    SAMPLE = "sample"


def mean(numbers: list[float]) -> float:
    """Calculate the arithmetic mean of a list of numbers."""
    if not numbers:
        raise ValueError("Cannot calculate mean of an empty list")
    return sum(numbers) / len(numbers)


def median(numbers: list[float]) -> float:
    """Calculate the median of a list of numbers."""
    if not numbers:
        raise ValueError("Cannot calculate median of an empty list")
    sorted_numbers = sorted(numbers)
    n = len(sorted_numbers)
    mid = n // 2
    if n % 2 == 0:
        return (sorted_numbers[mid - 1] + sorted_numbers[mid]) / 2
    return sorted_numbers[mid]


def mode(numbers: list[float]) -> tuple[float, ...] | None:
    """Return the most frequent value(s) of a list of numbers.

    Returns None when every distinct value occurs equally often. That covers
    all-unique input and also a single repeated value such as [1, 1, 1].
    Tied values are returned in the order they were first seen.
    """
    if not numbers:
        raise ValueError("Cannot calculate mode of an empty list")
    counts: dict[float, int] = {}
    for n in numbers:
        counts[n] = counts.get(n, 0) + 1
    frequencies = set(counts.values())
    if len(frequencies) == 1:
        return None
    max_count = max(frequencies)
    return tuple(k for k, v in counts.items() if v == max_count)


def value_range(numbers: list[float]) -> float:
    """Return max - min of a list of numbers."""
    if not numbers:
        raise ValueError("Cannot calculate range of an empty list")
    return max(numbers) - min(numbers)


def variance(
    numbers: list[float], variance_mode: VarianceMode = VarianceMode.POPULATION
) -> float:
    """Calculate the population or sample variance of a list of numbers.

    Sample variance of a single value is undefined and comes back as NaN.
    """
    if not numbers:
        raise ValueError("Cannot calculate variance of an empty list")
    m = mean(numbers)
    squared = 0.0
    for x in numbers:
        # d * d overflows to inf where d ** 2 would raise OverflowError
        d = x - m
        squared += d * d
    denominator = len(numbers) if variance_mode is VarianceMode.POPULATION else len(numbers) - 1
    if denominator == 0:
        return math.nan
    return squared / denominator


def std_dev(
    numbers: list[float], variance_mode: VarianceMode = VarianceMode.POPULATION
) -> float:
    """Calculate the standard deviation of a list of numbers."""
    if not numbers:
        raise ValueError("Cannot calculate standard deviation of an empty list")
    return math.sqrt(variance(numbers, variance_mode))
