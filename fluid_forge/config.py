"""
config.py — Default settings for the CLI host, overridable from the environment.

Variables (all optional, read after load_dotenv() so a .env file works too):

    FLUID_FORGE_MIN_VIEWPORT=375
    FLUID_FORGE_MAX_VIEWPORT=1620
    FLUID_FORGE_MIN_SIZE=16
    FLUID_FORGE_MAX_SIZE=20
    FLUID_FORGE_MIN_SCALE=1.125
    FLUID_FORGE_MAX_SCALE=1.333
    FLUID_FORGE_UNIT=px
    FLUID_FORGE_LOG_LEVEL=WARNING
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .defaults import (
    DEFAULT_MAX_BASE_SIZE,
    DEFAULT_MAX_SCALE,
    DEFAULT_MAX_VIEWPORT,
    DEFAULT_MIN_BASE_SIZE,
    DEFAULT_MIN_SCALE,
    DEFAULT_MIN_VIEWPORT,
    check_settings,
)
from .errors import InvalidRange
from .models import ScaleSettings
from .units import validate_unit

ENV_PREFIX = "FLUID_FORGE_"


@dataclass(frozen=True)
class ForgeConfig:
    min_viewport: float = DEFAULT_MIN_VIEWPORT
    max_viewport: float = DEFAULT_MAX_VIEWPORT
    min_size: float = DEFAULT_MIN_BASE_SIZE
    max_size: float = DEFAULT_MAX_BASE_SIZE
    min_scale: float = DEFAULT_MIN_SCALE
    max_scale: float = DEFAULT_MAX_SCALE
    unit: str = "px"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ForgeConfig":
        """
        Read FLUID_FORGE_* overrides.

        Raises:
            InvalidRange: a numeric variable does not parse
            InvalidUnit:  FLUID_FORGE_UNIT is not px/rem
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def number(name: str, default: float) -> float:
            raw = env.get(ENV_PREFIX + name)
            if raw is None or raw.strip() == "":
                return default
            try:
                return float(raw)
            except ValueError:
                raise InvalidRange(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from None

        unit = env.get(ENV_PREFIX + "UNIT", defaults.unit).strip().lower() or defaults.unit
        return cls(
            min_viewport=number("MIN_VIEWPORT", defaults.min_viewport),
            max_viewport=number("MAX_VIEWPORT", defaults.max_viewport),
            min_size=number("MIN_SIZE", defaults.min_size),
            max_size=number("MAX_SIZE", defaults.max_size),
            min_scale=number("MIN_SCALE", defaults.min_scale),
            max_scale=number("MAX_SCALE", defaults.max_scale),
            unit=validate_unit(unit),
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
        )

    def settings(self, **overrides) -> ScaleSettings:
        """
        ScaleSettings from this config; keyword overrides win (None is ignored).

        Raises:
            InvalidRange: a viewport, base size or scale ratio is outside the form ranges
        """
        values = {
            "min_viewport": self.min_viewport,
            "max_viewport": self.max_viewport,
            "min_value": self.min_size,
            "max_value": self.max_size,
            "unit": self.unit,
            "min_scale": self.min_scale,
            "max_scale": self.max_scale,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return check_settings(ScaleSettings.create(**values))
