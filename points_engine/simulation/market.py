"""
Market Model

Day-indexed exchange-rate multipliers for each market regime. A multiplier
scales the base rate (points per unit), so values above 1.0 make points
buy less.

- stable:   +/-2% oscillation
- volatile: +/-10% oscillation plus bounded noise
- bullish:  upward linear drift plus oscillation
- bearish:  downward linear drift plus oscillation

The model keeps no state between calls. Noise for the volatile regime comes
from a generator seeded by (seed, regime, day), so any day can be
recomputed independently and always yields the same value.
"""

from typing import Union
import hashlib
import math
import random

from ..core.entities import MarketRegime


DEFAULT_SEED = 42
MIN_MULTIPLIER = 0.5
MAX_MULTIPLIER = 1.5


class MarketModel:
    """Pure function of (day, regime), clamped to a sane band."""

    def __init__(
        self,
        seed: int = DEFAULT_SEED,
        min_multiplier: float = MIN_MULTIPLIER,
        max_multiplier: float = MAX_MULTIPLIER
    ):
        if not 0 < min_multiplier <= 1.0 <= max_multiplier:
            raise ValueError(
                f"Multiplier band [{min_multiplier}, {max_multiplier}] must be positive and contain 1.0"
            )
        self.seed = seed
        self.min_multiplier = min_multiplier
        self.max_multiplier = max_multiplier

    def multiplier(self, day: int, regime: Union[MarketRegime, str]) -> float:
        """Multiplier for a day (day >= 0) under a regime."""
        if isinstance(day, bool) or not isinstance(day, int) or day < 0:
            raise ValueError(f"Day must be a non-negative integer, got {day!r}")

        regime = MarketRegime(regime)
        raw = self._raw_multiplier(day, regime)
        return min(self.max_multiplier, max(self.min_multiplier, raw))

    def series(self, days: int, regime: Union[MarketRegime, str]) -> list[float]:
        """Multipliers for days 1..days."""
        return [self.multiplier(day, regime) for day in range(1, days + 1)]

    def _raw_multiplier(self, day: int, regime: MarketRegime) -> float:
        if regime == MarketRegime.STABLE:
            return 1.0 + math.sin(day * 0.1) * 0.02
        elif regime == MarketRegime.VOLATILE:
            noise = self._noise(day, regime) - 0.5
            return 1.0 + math.sin(day * 0.3) * 0.1 + noise * 0.1
        elif regime == MarketRegime.BULLISH:
            return 1.0 + day * 0.001 + math.sin(day * 0.2) * 0.03
        elif regime == MarketRegime.BEARISH:
            return 1.0 - day * 0.001 + math.sin(day * 0.2) * 0.03
        else:
            raise ValueError(f"Unsupported market regime: {regime}")

    def _noise(self, day: int, regime: MarketRegime) -> float:
        """Uniform [0, 1) draw that depends only on (seed, regime, day)."""
        key = f"{self.seed}:{regime.value}:{day}".encode("utf-8")
        digest = hashlib.sha256(key).digest()
        rng = random.Random(int.from_bytes(digest[:8], "big"))
        return rng.random()
