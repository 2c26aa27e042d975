from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union

from flask import current_app, has_app_context

from .errors import CaveConfigError

MIN_SIZE = 5  # smoothing needs a 3x3 interior
MIN_TERMINAL_SIZE = 31  # transition gap offset is drawn from [15, size - 15)
FILL_PERCENT_RANGE = (40, 60)


@dataclass
class CaveConfig:
    size: int = 50
    fill_percent: int = 45
    seed: Optional[Union[int, str]] = None
    use_random_seed: bool = False
    smooth_amount: int = 5
    min_room_size: int = 20
    min_wall_size: int = 20
    passage_radius: int = 10
    square_size: int = 1
    enable_metrics: bool = True

    def validate(self) -> None:
        """Raise CaveConfigError for parameters that cannot produce a cave."""
        if self.size < MIN_SIZE:
            raise CaveConfigError("size", f"must be at least {MIN_SIZE}", "min")
        lo, hi = FILL_PERCENT_RANGE
        if not lo <= self.fill_percent <= hi:
            raise CaveConfigError("fill_percent", f"must be within [{lo},{hi}]", "range")
        for name in ("smooth_amount", "passage_radius", "min_room_size", "min_wall_size"):
            if getattr(self, name) < 0:
                raise CaveConfigError(name, "must not be negative", "min")
        cells = self.size * self.size
        for name in ("min_room_size", "min_wall_size"):
            if getattr(self, name) > cells:
                raise CaveConfigError(name, f"exceeds grid cell count {cells}", "max")


# env var / app config key -> (attribute, parser)
_BOOL_FALSE = {"0", "false", "no", ""}
_OVERRIDES = {
    "CAVE_ENABLE_GENERATION_METRICS": ("enable_metrics", lambda v: str(v).lower() not in _BOOL_FALSE),
    "CAVE_SMOOTH_AMOUNT": ("smooth_amount", int),
    "CAVE_PASSAGE_RADIUS": ("passage_radius", int),
}


def apply_overrides(config: CaveConfig) -> CaveConfig:
    """Apply environment then Flask app config overrides in place.

    Flask ``current_app.config`` wins over the environment when an
    application context is active, so a host app can pin generation flags
    without touching process env.
    """
    for key, (attr, parse) in _OVERRIDES.items():
        if key in os.environ:
            try:
                setattr(config, attr, parse(os.environ[key]))
            except ValueError as exc:
                raise CaveConfigError(attr, f"bad value in ${key}: {exc}", "env") from exc
    if has_app_context():
        cfg = current_app.config
        for key, (attr, parse) in _OVERRIDES.items():
            if key in cfg:
                try:
                    setattr(config, attr, parse(cfg[key]))
                except (TypeError, ValueError) as exc:
                    raise CaveConfigError(attr, f"bad value in app config {key}: {exc}", "app_config") from exc
    return config


__all__ = ["CaveConfig", "apply_overrides", "MIN_SIZE", "MIN_TERMINAL_SIZE", "FILL_PERCENT_RANGE"]
