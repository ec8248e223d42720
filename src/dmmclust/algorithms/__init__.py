"""
Algorithm Core Library - DMM short-text clustering.

This module provides the collapsed Gibbs sampler for the Dirichlet
Multinomial Mixture model, separate from any tokenisation or I/O.
Designed for reuse and testing.
"""

from .documents import Document, TokenSet, unique_tokens
from .cluster import Cluster
from .scoring import (
    ScoringFn,
    algorithm3,
    algorithm4,
    normalize,
    normalize_log,
    scoring_executor,
)
from .sampling import Sampler, GibbsSampler
from .dmm import (
    BURN_IN_ROUNDS,
    ConfigError,
    DMMConfig,
    DMMResult,
    find_clusters,
    fit_dmm,
)

__all__ = [
    # Documents
    "Document",
    "TokenSet",
    "unique_tokens",
    # Statistics
    "Cluster",
    # Scoring
    "ScoringFn",
    "algorithm3",
    "algorithm4",
    "normalize",
    "normalize_log",
    "scoring_executor",
    # Sampling
    "Sampler",
    "GibbsSampler",
    # Driver
    "BURN_IN_ROUNDS",
    "ConfigError",
    "DMMConfig",
    "DMMResult",
    "find_clusters",
    "fit_dmm",
]
