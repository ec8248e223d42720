"""
dmmclust - Short text clustering with a Dirichlet Multinomial Mixture

Clusters short documents (tweets, titles, queries) given as integer token
sequences, without fixing the number of clusters beyond an upper bound.

This package provides:
- Cluster sufficient statistics and document abstraction
- Scoring functions (Algorithm 3 / Algorithm 4) and samplers
- The collapsed Gibbs sampling driver
"""

__version__ = "0.1.0"

from .algorithms import (
    Cluster,
    ConfigError,
    DMMConfig,
    DMMResult,
    Document,
    GibbsSampler,
    Sampler,
    TokenSet,
    algorithm3,
    algorithm4,
    find_clusters,
    fit_dmm,
    unique_tokens,
)

# Explicitly import subpackages to ensure they're discoverable
from . import algorithms
from . import utils

__all__ = [
    "Cluster",
    "ConfigError",
    "DMMConfig",
    "DMMResult",
    "Document",
    "GibbsSampler",
    "Sampler",
    "TokenSet",
    "algorithm3",
    "algorithm4",
    "find_clusters",
    "fit_dmm",
    "unique_tokens",
    "algorithms",
    "utils",
]
