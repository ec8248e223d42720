"""
Per-cluster sufficient statistics.

A Cluster does not store any documents, only the counts needed by the
collapsed Gibbs sampler: how many documents it holds, how many words those
documents contain, and a sparse token frequency table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .documents import Document


@dataclass
class Cluster:
    """Sufficient statistics for one cluster."""

    cluster_id: int = -1
    n_docs: int = 0
    n_words: int = 0
    dist: Dict[int, float] = field(default_factory=dict)

    def add_doc(self, doc: Document) -> None:
        """Count ``doc`` into this cluster."""
        self.n_docs += 1
        self.n_words += len(doc)
        for tok in doc.token_set():
            self.dist[tok] = self.dist.get(tok, 0.0) + 1.0

    def remove_doc(self, doc: Document) -> None:
        """
        Inverse of ``add_doc``.

        The caller must have added ``doc`` to this cluster first; otherwise
        the counts go negative.
        """
        self.n_docs -= 1
        self.n_words -= len(doc)
        for tok in doc.token_set():
            self.dist[tok] = self.dist.get(tok, 0.0) - 1.0

    def freq(self, token: int) -> float:
        """Frequency of ``token`` in this cluster (0.0 if never seen)."""
        return self.dist.get(token, 0.0)

    def words(self) -> List[int]:
        """Token IDs with a frequency entry. Order is not guaranteed."""
        return list(self.dist)

    def copy(self) -> "Cluster":
        return Cluster(
            cluster_id=self.cluster_id,
            n_docs=self.n_docs,
            n_words=self.n_words,
            dist=dict(self.dist),
        )
