"""Calculator configuration and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from decicalc.exceptions import ConfigError
from decicalc.fallback import AngleMode
from decicalc.history import DEFAULT_CAPACITY

ERROR_TEXT = "Error"

_ANGLE_MODES = {
    "deg": AngleMode.DEGREES,
    "degrees": AngleMode.DEGREES,
    "rad": AngleMode.RADIANS,
    "radians": AngleMode.RADIANS,
}


def parse_angle_mode(mode: AngleMode | str) -> AngleMode:
    """
    Resolve an angle mode from an AngleMode or a name such as ``"rad"``.

    Names are case-insensitive and may be ``deg``, ``degrees``, ``rad`` or
    ``radians``.

    Raises:
        ConfigError: If the name is not a known angle mode
    """
    if isinstance(mode, AngleMode):
        return mode
    try:
        return _ANGLE_MODES[str(mode).strip().lower()]
    except KeyError as e:
        raise ConfigError("Angle mode must be 'deg' or 'rad'", mode) from e


@dataclass(frozen=True)
class CalculatorConfig:
    """
    Settings for a CalculatorController.

    Attributes:
        history_capacity: Maximum number of history entries kept
        angle_mode: Unit for sin, cos and tan arguments
        error_text: Display shown after a failed computation
    """

    history_capacity: int = DEFAULT_CAPACITY
    angle_mode: AngleMode = AngleMode.DEGREES
    error_text: str = ERROR_TEXT

    def __post_init__(self) -> None:
        if self.history_capacity < 1:
            raise ConfigError("History capacity must be positive", self.history_capacity)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> CalculatorConfig:
        """
        Build a config from ``DECICALC_*`` environment variables.

        Recognised variables are ``DECICALC_HISTORY_CAPACITY`` and
        ``DECICALC_ANGLE_MODE`` (``deg``/``degrees`` or ``rad``/``radians``).
        Unset variables keep their defaults.

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        kwargs: dict = {}

        capacity = env.get("DECICALC_HISTORY_CAPACITY")
        if capacity is not None:
            try:
                kwargs["history_capacity"] = int(capacity)
            except ValueError as e:
                raise ConfigError("DECICALC_HISTORY_CAPACITY must be an integer", capacity) from e

        mode = env.get("DECICALC_ANGLE_MODE")
        if mode is not None:
            kwargs["angle_mode"] = parse_angle_mode(mode)

        return cls(**kwargs)


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """
    Attach a stream handler to the ``decicalc`` logger.

    The level defaults to ``DECICALC_LOG_LEVEL`` or WARNING. Calling this
    more than once only updates the level.
    """
    if level is None:
        level = os.environ.get("DECICALC_LOG_LEVEL", "WARNING")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger("decicalc")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)

    return logger
