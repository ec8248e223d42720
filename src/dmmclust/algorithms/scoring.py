"""
Scoring functions for the DMM collapsed Gibbs sampler.

Each scoring function turns (document, corpus, cluster statistics, config)
into a probability vector over the K clusters. The two formulas follow
Equations 3 and 4 of Yin & Wang (2014), "A Dirichlet Multinomial Mixture
Model-based Approach for Short Text Clustering".

Per-cluster scores are accumulated in log space: every factor is roughly
1/vocabulary, so plain products underflow to zero for longer documents.
"""

from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from contextvars import ContextVar
from typing import (
    TYPE_CHECKING,
    Callable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

import numpy as np

from .cluster import Cluster
from .documents import Document

if TYPE_CHECKING:
    from .dmm import DMMConfig

T = TypeVar("T")

ScoringFn = Callable[
    [Document, Sequence[Document], Sequence[Cluster], "DMMConfig"], np.ndarray
]

# Executor shared by every scoring call inside one clustering run.
_active_executor: ContextVar[Optional[ThreadPoolExecutor]] = ContextVar(
    "dmmclust_scoring_executor", default=None
)


def normalize(p: Sequence[float]) -> np.ndarray:
    """
    Scale ``p`` so it sums to 1.

    A non-positive sum is treated as 1, so an all-zero vector comes back
    unchanged instead of producing NaNs.
    """
    p = np.asarray(p, dtype=np.float64)
    norm = p.sum()
    if norm <= 0:
        norm = 1.0
    return p / norm


def normalize_log(logp: Sequence[float]) -> np.ndarray:
    """
    Turn log scores into probabilities summing to 1.

    The maximum is subtracted before exponentiating. If every score is
    ``-inf`` (all clusters truly zero) an all-zero vector is returned.
    """
    logp = np.asarray(logp, dtype=np.float64)
    if logp.size == 0 or not np.isfinite(logp.max()):
        return np.zeros_like(logp)
    return normalize(np.exp(logp - logp.max()))


@contextmanager
def scoring_executor(n_workers: int) -> Iterator[Optional[ThreadPoolExecutor]]:
    """
    Share one thread pool across all scoring calls made inside the block.

    Yields None (and scoring stays sequential) when ``n_workers <= 1``.
    """
    if n_workers <= 1:
        yield None
        return
    with ThreadPoolExecutor(max_workers=n_workers) as executor:
        token = _active_executor.set(executor)
        try:
            yield executor
        finally:
            _active_executor.reset(token)


def _map_clusters(
    fn: Callable[[Cluster], T], clusters: Sequence[Cluster], n_workers: int
) -> List[T]:
    """Apply ``fn`` to every cluster and wait for all results."""
    if n_workers <= 1 or len(clusters) <= 1:
        return [fn(c) for c in clusters]
    executor = _active_executor.get()
    if executor is not None:
        return list(executor.map(fn, clusters))
    n_threads = min(n_workers, len(clusters))
    with ThreadPoolExecutor(max_workers=n_threads) as executor:
        return list(executor.map(fn, clusters))


def _prior_mass(n_docs: int, cfg: "DMMConfig") -> float:
    # alpha / (D - 1 + K*alpha); the term added to every cluster's doc count
    return cfg.alpha / (n_docs - 1.0 + cfg.k * cfg.alpha)


def _log(x: float) -> float:
    return math.log(x) if x > 0 else -math.inf


def _log_score(
    prior: float,
    numerators: Sequence[float],
    cluster: Cluster,
    doc: Document,
    cfg: "DMMConfig",
) -> float:
    base = cluster.n_words + cfg.vocabulary * cfg.beta
    score = _log(prior)
    for num in numerators:
        score += _log(num)
    for j in range(len(doc)):
        score -= math.log(base + j)
    return score


class _KeyCounts:
    """
    Linear key/count list for the distinct tokens of one document.

    Short documents have few distinct tokens, so a list scan is cheaper than
    a dict and keeps first-appearance order.
    """

    __slots__ = ("_items",)

    def __init__(self, tokens: Sequence[int] = ()):
        self._items: List[List[int]] = []
        for tok in tokens:
            self.incr(tok)

    def incr(self, key: int) -> None:
        for item in self._items:
            if item[0] == key:
                item[1] += 1
                return
        self._items.append([key, 1])

    def items(self) -> List[Tuple[int, int]]:
        return [(k, v) for k, v in self._items]


def algorithm3(
    doc: Document,
    docs: Sequence[Document],
    clusters: Sequence[Cluster],
    cfg: "DMMConfig",
) -> np.ndarray:
    """
    Cluster probabilities for a document whose tokens occur at most once.

    De-duplicating the document is the caller's job (see
    ``dmmclust.algorithms.documents.unique_tokens``). For documents with
    repeated tokens use ``algorithm4``.

    Args:
        doc: Document being reassigned (already removed from its cluster)
        docs: Full corpus, used only for its size
        clusters: Current statistics for all K clusters
        cfg: DMMConfig with alpha, beta, k and vocabulary

    Returns:
        Array of shape (K,) summing to 1 (all zeros only if every cluster
        has zero probability)
    """
    tokens = list(doc.token_set())
    prior_mass = _prior_mass(len(docs), cfg)

    def score(cluster: Cluster) -> float:
        p = cluster.n_docs + prior_mass
        numerators = [cluster.freq(tok) + cfg.beta for tok in tokens]
        return _log_score(p, numerators, cluster, doc, cfg)

    return normalize_log(_map_clusters(score, clusters, cfg.n_workers))


def algorithm4(
    doc: Document,
    docs: Sequence[Document],
    clusters: Sequence[Cluster],
    cfg: "DMMConfig",
) -> np.ndarray:
    """
    Cluster probabilities for a document that may repeat tokens.

    A token seen ``m`` times contributes the rising product
    ``(freq + beta) (freq + beta + 1) ... (freq + beta + m - 1)``. With no
    repeats this is exactly ``algorithm3``.
    """
    counts = _KeyCounts(doc.token_set()).items()
    prior_mass = _prior_mass(len(docs), cfg)

    def score(cluster: Cluster) -> float:
        p = cluster.n_docs + prior_mass
        numerators = [
            cluster.freq(tok) + cfg.beta + r
            for tok, m in counts
            for r in range(m)
        ]
        return _log_score(p, numerators, cluster, doc, cfg)

    return normalize_log(_map_clusters(score, clusters, cfg.n_workers))
