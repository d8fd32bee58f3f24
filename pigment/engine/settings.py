from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from pigment.colors.mixing import BRIGHTEN_FACTOR, DARKEN_FACTOR

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 8


@dataclass(frozen=True)
class EngineSettings:
    """
    Tunables for color propagation.

    Attributes
    ----------
    max_rounds:
        Upper bound on evaluation rounds, which keeps cyclic wiring finite.
    brighten_factor / darken_factor:
        Channel multipliers applied by gradientors.
    """

    max_rounds: int = DEFAULT_MAX_ROUNDS
    brighten_factor: float = BRIGHTEN_FACTOR
    darken_factor: float = DARKEN_FACTOR

    def __post_init__(self) -> None:
        if self.max_rounds < 1:
            object.__setattr__(self, "max_rounds", 1)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineSettings":
        """
        Build settings from ``PIGMENT_*`` environment variables, falling back
        to the defaults for anything missing or unparsable.
        """

        env = os.environ if environ is None else environ
        defaults = cls()

        max_rounds = _read_number(env, "PIGMENT_MAX_ROUNDS", int, defaults.max_rounds)
        brighten = _read_number(env, "PIGMENT_BRIGHTEN_FACTOR", float, defaults.brighten_factor)
        darken = _read_number(env, "PIGMENT_DARKEN_FACTOR", float, defaults.darken_factor)

        return cls(
            max_rounds=max_rounds,
            brighten_factor=brighten,
            darken_factor=darken,
        )


def _read_number(env: Mapping[str, str], name: str, cast, default):
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        value = None
    # Factors must be finite and positive.
    if value is None or (cast is float and not (math.isfinite(value) and value > 0)):
        logger.warning("Ignoring invalid %s=%r; using %s", name, raw, default)
        return default
    return value
