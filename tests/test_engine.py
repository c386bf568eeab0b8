"""Tests for calculate() and render()."""
import logging
import math

import pytest

from src.config import Settings
from src.engine import (
    FIELDS,
    OVERFLOWED,
    UNDEFINED_FOR_SINGLE_VALUE,
    EmptyResult,
    StatisticsResult,
    calculate,
    is_usable,
    render,
    unusable_reason,
)
from src.stats import VarianceMode


@pytest.fixture
def sample_text():
    return "2, 4, 4, 4; 5 5\n7 9"


# --- calculate ---

def test_calculate_population(sample_text):
    result = calculate(sample_text)
    assert isinstance(result, StatisticsResult)
    assert result.count == 8
    assert result.variance_mode is VarianceMode.POPULATION
    assert result.mean == 5
    assert result.median == 4.5
    assert result.mode == (4,)
    assert result.range == 7
    assert result.variance == 4
    assert result.std_dev == 2


def test_calculate_sample(sample_text):
    result = calculate(sample_text, VarianceMode.SAMPLE)
    assert math.isclose(result.variance, 32 / 7)
    assert math.isclose(result.std_dev, math.sqrt(32 / 7))
    # the toggle does not affect the other statistics
    assert result.mean == 5
    assert result.range == 7


@pytest.mark.parametrize("text", ["", " ", ",;,", "no numbers here"])
def test_calculate_empty_input(text):
    assert calculate(text) == EmptyResult()


def test_calculate_is_idempotent(sample_text):
    assert calculate(sample_text) == calculate(sample_text)


def test_calculate_sample_single_value_is_not_usable(caplog):
    with caplog.at_level(logging.WARNING):
        result = calculate("5", VarianceMode.SAMPLE)
    assert math.isnan(result.variance)
    assert math.isnan(result.std_dev)
    assert not is_usable(result.variance)
    assert "undefined" in caplog.text


def test_calculate_population_single_value():
    result = calculate("5")
    assert result.variance == 0
    assert result.std_dev == 0
    assert result.mode is None


# --- render ---

def test_render_field_order(sample_text):
    assert tuple(render(calculate(sample_text))) == FIELDS


def test_render_population(sample_text):
    assert render(calculate(sample_text)) == {
        "mean": "5",
        "median": "4.5",
        "mode": "4",
        "range": "7",
        "variance": "4",
        "std_dev": "2",
    }


def test_render_sample_rounds_to_four_digits(sample_text):
    display = render(calculate(sample_text, VarianceMode.SAMPLE))
    assert display["variance"] == "4.5714"
    assert display["std_dev"] == "2.1381"


def test_render_custom_digits(sample_text):
    display = render(calculate(sample_text, VarianceMode.SAMPLE), Settings(digits=1))
    assert display["variance"] == "4.6"


def test_render_empty_uses_placeholder_everywhere():
    assert render(EmptyResult()) == {name: "—" for name in FIELDS}


def test_render_empty_custom_placeholder():
    display = render(calculate(""), Settings(empty_placeholder="-"))
    assert set(display.values()) == {"-"}


def test_render_nan_is_distinct_from_numbers():
    display = render(calculate("5", VarianceMode.SAMPLE))
    assert display["variance"] == "NaN"
    assert display["std_dev"] == "NaN"
    assert display["mean"] == "5"


def test_render_mode_variants():
    assert render(calculate("1 2 3"))["mode"] == "no mode"
    assert render(calculate("1 1 1"))["mode"] == "no mode"
    assert render(calculate("1,1,2,2,3"))["mode"] == "1, 2"
    assert render(calculate("1 2 3"), Settings(no_mode_label="none"))["mode"] == "none"


def test_render_mode_values_are_not_rounded():
    assert render(calculate("0.123456 0.123456 1"))["mode"] == "0.123456"


def test_calculate_overflow_renders_infinity():
    result = calculate("1e200 -1e200")
    assert result.variance == math.inf
    display = render(result)
    assert display["variance"] == "Infinity"
    assert display["std_dev"] == "Infinity"
    assert display["mean"] == "0"


def test_unusable_reason_single_sample_value():
    assert unusable_reason(calculate("5", VarianceMode.SAMPLE)) == UNDEFINED_FOR_SINGLE_VALUE


def test_unusable_reason_overflow(caplog):
    with caplog.at_level(logging.WARNING):
        result = calculate("1e308 1e308")
    assert result.mean == math.inf
    assert unusable_reason(result) == OVERFLOWED
    assert "overflowed" in caplog.text
    assert "single value" not in caplog.text
