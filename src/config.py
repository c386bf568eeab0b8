"""Load display and computation settings from a YAML file."""

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from src.formatting import DEFAULT_DIGITS
from src.stats import VarianceMode


class ConfigError(ValueError):
    """Raised when a settings file is malformed or holds invalid values."""


@dataclass
class Settings:
    digits: int = DEFAULT_DIGITS
    variance_mode: VarianceMode = VarianceMode.POPULATION
    empty_placeholder: str = "—"
    no_mode_label: str = "no mode"


def load_settings(config_path: str | Path) -> Settings:
    """Read a YAML settings file and return a Settings object.

    The document must be a mapping using any of the keys: digits,
    variance_mode ('population' or 'sample'), empty_placeholder,
    no_mode_label. Missing keys keep their defaults and an empty file
    yields the defaults.

    Raises ConfigError for unknown keys or invalid values.
    """
    config_path = Path(config_path)
    with open(config_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top level of {config_path}")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown setting(s) in {config_path}: {', '.join(unknown)}")

    settings = Settings()
    if "digits" in data:
        digits = data["digits"]
        if isinstance(digits, bool) or not isinstance(digits, int) or digits < 0:
            raise ConfigError(f"'digits' must be a non-negative integer, got {digits!r}")
        settings.digits = digits
    if "variance_mode" in data:
        settings.variance_mode = parse_variance_mode(data["variance_mode"])
    for key in ("empty_placeholder", "no_mode_label"):
        if key in data:
            if not isinstance(data[key], str):
                raise ConfigError(f"'{key}' must be a string, got {data[key]!r}")
            setattr(settings, key, data[key])

    return settings


def parse_variance_mode(value: object) -> VarianceMode:
    """Map 'population' / 'sample' (any case) to a VarianceMode."""
    try:
        return VarianceMode(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(m.value for m in VarianceMode)
        raise ConfigError(
            f"'variance_mode' must be one of {choices}, got {value!r}"
        ) from None
