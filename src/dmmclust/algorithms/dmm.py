"""
Dirichlet Multinomial Mixture clustering driver.

Runs the collapsed Gibbs sampler (GSDMM) over a corpus of short token
documents: random initial assignment, repeated remove/rescore/resample/
re-add passes until the assignment settles or the iteration budget runs
out, then dense relabeling of the surviving clusters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

import numpy as np

from ..config import settings
from ..utils.logging_config import get_logger
from .cluster import Cluster
from .documents import Document
from .sampling import Sampler
from .scoring import ScoringFn, scoring_executor

logger = get_logger(__name__)

# Early stopping is only honoured from this (0-based) round onwards.
BURN_IN_ROUNDS = 26

IterationHook = Callable[[int, int, int], None]


class ConfigError(ValueError):
    """Raised when a DMMConfig cannot be used for clustering."""


@dataclass(frozen=True)
class DMMConfig:
    """Configuration for a DMM clustering run."""

    k: int = 10  # maximum number of clusters
    vocabulary: int = 0  # size of the token ID space
    max_iter: int = 1000
    alpha: float = 0.0001  # mass reserved for joining an empty cluster
    beta: float = 0.1  # affinity to clusters sharing words
    score: Optional[ScoringFn] = None
    sampler: Optional[Sampler] = None
    n_workers: int = field(default_factory=lambda: settings.score_workers)

    def validate(self) -> None:
        """
        Check the config before any document is touched.

        Raises:
            ConfigError: If score or sampler is missing, or a numeric field
                is out of range
        """
        if self.score is None:
            raise ConfigError("Expected score to not be None")
        if self.sampler is None:
            raise ConfigError("Expected sampler to not be None")
        if self.k < 1:
            raise ConfigError(f"k must be >= 1, got {self.k}")
        if self.vocabulary < 1:
            raise ConfigError(f"vocabulary must be >= 1, got {self.vocabulary}")
        if self.max_iter < 0:
            raise ConfigError(f"max_iter must be >= 0, got {self.max_iter}")
        if self.alpha <= 0:
            raise ConfigError(f"alpha must be > 0, got {self.alpha}")
        if self.beta <= 0:
            raise ConfigError(f"beta must be > 0, got {self.beta}")
        if self.n_workers < 1:
            raise ConfigError(f"n_workers must be >= 1, got {self.n_workers}")


@dataclass
class DMMResult:
    """Result of a single DMM run."""

    clusters: List[Cluster]
    labels: np.ndarray
    n_iter: int = 0
    converged: bool = False
    metadata: Dict[str, Any] = None

    def __post_init__(self):
        """Initialize metadata if None."""
        if self.metadata is None:
            self.metadata = {}

    @property
    def n_clusters(self) -> int:
        """Number of distinct non-empty clusters in the result."""
        return len(np.unique(self.labels))


def _count_nonempty(state: Sequence[Cluster]) -> int:
    return sum(1 for c in state if c.n_docs > 0)


def _relabel(
    state: Sequence[Cluster], assignment: np.ndarray, k: int
) -> tuple[List[Cluster], np.ndarray]:
    """One cluster snapshot per document, dense IDs by first appearance."""
    reindex = np.full(k, -1, dtype=int)
    next_id = 0
    snapshots: List[Cluster] = []
    labels = np.empty(len(assignment), dtype=int)
    for i, z in enumerate(assignment):
        if reindex[z] < 0:
            reindex[z] = next_id
            next_id += 1
        snap = state[z].copy()
        snap.cluster_id = int(reindex[z])
        snapshots.append(snap)
        labels[i] = snap.cluster_id
    return snapshots, labels


def _gibbs_round(
    docs: Sequence[Document],
    state: List[Cluster],
    assignment: np.ndarray,
    cfg: DMMConfig,
) -> int:
    """Reassign every document once, in order. Returns the number moved."""
    transfers = 0
    for j, doc in enumerate(docs):
        old = assignment[j]
        state[old].remove_doc(doc)

        p = cfg.score(doc, docs, state, cfg)
        z = cfg.sampler.sample(p)
        if z != old:
            transfers += 1

        assignment[j] = z
        state[z].add_doc(doc)
    return transfers


def fit_dmm(
    docs: Sequence[Document],
    cfg: DMMConfig,
    *,
    on_iteration: Optional[IterationHook] = None,
) -> DMMResult:
    """
    Cluster ``docs`` with a collapsed Gibbs sampler over a DMM.

    Each round visits the documents in order: the document is removed from
    its cluster, ``cfg.score`` turns the remaining statistics into a
    probability vector, ``cfg.sampler`` picks the new cluster and the
    document is added there. The run stops early once a round moves no
    document and leaves the number of non-empty clusters unchanged, but
    never before round ``BURN_IN_ROUNDS``.

    Args:
        docs: Documents to cluster
        cfg: DMMConfig with hyperparameters, scoring function and sampler
        on_iteration: Optional ``(round, transfers, n_nonempty)`` callback
            invoked after every round

    Returns:
        DMMResult with one Cluster snapshot per document, dense labels,
        the number of rounds run and whether early stopping triggered

    Raises:
        ConfigError: If ``cfg`` fails validation
    """
    try:
        cfg.validate()
    except ConfigError as e:
        logger.warning("Invalid DMM config: %s", e)
        raise

    n_docs = len(docs)
    logger.info(
        "Starting DMM run: %d docs, k=%d, max_iter=%d, alpha=%g, beta=%g",
        n_docs, cfg.k, cfg.max_iter, cfg.alpha, cfg.beta,
    )

    state = [Cluster() for _ in range(cfg.k)]
    uniform = np.full(cfg.k, 1.0 / cfg.k)

    # Initial assignment goes through the sampler too, so it is reproducible
    assignment = np.empty(n_docs, dtype=int)
    for i, doc in enumerate(docs):
        z = cfg.sampler.sample(uniform)
        assignment[i] = z
        state[z].add_doc(doc)

    cluster_count = cfg.k
    transfers_history: List[int] = []
    n_iter = 0
    converged = False
    with scoring_executor(cfg.n_workers):
        for it in range(cfg.max_iter):
            n_iter = it + 1
            transfers = _gibbs_round(docs, state, assignment, cfg)

            nonempty = _count_nonempty(state)
            transfers_history.append(transfers)
            logger.debug(
                "Round %d: %d transfers, %d non-empty clusters",
                it, transfers, nonempty,
            )
            if on_iteration is not None:
                on_iteration(it, transfers, nonempty)

            if (
                transfers == 0
                and nonempty == cluster_count
                and it >= BURN_IN_ROUNDS
            ):
                converged = True
                break
            cluster_count = nonempty

    if converged:
        logger.info(
            "DMM converged after %d rounds with %d clusters", n_iter, cluster_count
        )
    else:
        logger.info("DMM stopped after %d rounds (max_iter reached)", n_iter)

    clusters, labels = _relabel(state, assignment, cfg.k)
    return DMMResult(
        clusters=clusters,
        labels=labels,
        n_iter=n_iter,
        converged=converged,
        metadata={
            "k": cfg.k,
            "alpha": cfg.alpha,
            "beta": cfg.beta,
            "transfers": transfers_history,
        },
    )


def find_clusters(docs: Sequence[Document], cfg: DMMConfig) -> List[Cluster]:
    """
    Cluster ``docs`` and return one Cluster snapshot per document.

    Documents in the same final cluster get equal copies carrying the same
    ``cluster_id``; IDs run ``0, 1, 2, ...`` in order of first appearance.

    Raises:
        ConfigError: If ``cfg`` fails validation
    """
    return fit_dmm(docs, cfg).clusters
