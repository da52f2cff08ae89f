"""Random sampling filter."""

from __future__ import annotations

import random
from numbers import Real
from typing import Any, ClassVar

from filterkit.domain.exceptions import InvalidFractionError
from filterkit.domain.filters.base import FilterBase


class RandomFilter(FilterBase):
    """Filter that accepts a random fraction of the input it sees.

    Each call draws one value uniformly from [0, 1) and accepts iff it is
    below fraction. The input itself is ignored. fraction=0.0 never accepts,
    fraction=1.0 always accepts.

    Thread Safety:
      - NOT safe for concurrent calls: every call advances the generator
        without locking. Use one instance per thread or lock externally.

    Reproducibility:
      - rng=None creates a fresh unseeded generator: results differ per run.
      - Pass random.Random(seed) for deterministic sequences (tests).
    """

    DEFAULT_FRACTION: ClassVar[float] = 0.1

    __slots__ = ("_fraction", "_random")

    def __init__(
        self,
        fraction: float = DEFAULT_FRACTION,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize with acceptance fraction and generator.

        Args:
            fraction: Probability of accepting, in [0, 1].
            rng: Generator owned by this filter. None = new unseeded one.

        Raises:
            InvalidFractionError: If fraction is not a number in [0, 1].
        """
        # bool is a Real subclass but never a meaningful fraction
        if isinstance(fraction, bool) or not isinstance(fraction, Real):
            raise InvalidFractionError(fraction)
        if not 0.0 <= fraction <= 1.0:
            raise InvalidFractionError(fraction)

        self._fraction = float(fraction)
        self._random = rng if rng is not None else random.Random()

    @property
    def fraction(self) -> float:
        """Probability of accepting."""
        return self._fraction

    def __call__(self, obj: Any) -> bool:
        return self._random.random() < self._fraction

    def __str__(self) -> str:
        return f"RandomFilter({self._fraction})"
