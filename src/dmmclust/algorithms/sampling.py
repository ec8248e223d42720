"""
Categorical samplers used by the DMM driver.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

import numpy as np

from ..config import settings


@runtime_checkable
class Sampler(Protocol):
    """Draws one index from a vector of non-negative weights."""

    def sample(self, p: Sequence[float]) -> int: ...


class GibbsSampler:
    """
    Single multinomial draw over cluster probabilities.

    Args:
        seed: Seed for a fresh ``np.random.default_rng``. Falls back to
            ``settings.default_seed`` (DMMCLUST_SEED) when not given.
        rng: Existing generator to draw from (takes precedence over seed)
    """

    def __init__(
        self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None
    ):
        if rng is None:
            if seed is None:
                seed = settings.default_seed
            rng = np.random.default_rng(seed)
        self._rng = rng

    def sample(self, p: Sequence[float]) -> int:
        """
        Return an index in ``[0, len(p))`` with probability proportional to ``p``.

        Raises:
            ValueError: If ``p`` is empty, has negative or non-finite
                weights, or has no positive mass
        """
        p = np.asarray(p, dtype=np.float64)
        if p.ndim != 1 or p.size == 0:
            raise ValueError(f"p must be a non-empty 1-D vector, got shape {p.shape}")
        if not np.all(np.isfinite(p)) or np.any(p < 0):
            raise ValueError("p must contain only finite, non-negative weights")
        total = p.sum()
        if total <= 0:
            raise ValueError("cannot sample from a vector with zero total mass")

        draw = self._rng.multinomial(1, p / total)
        return int(np.flatnonzero(draw)[0])
