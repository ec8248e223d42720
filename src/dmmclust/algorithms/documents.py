"""
Document abstraction for the DMM sampler.

A document is anything that exposes its token IDs and a length. The sampler
never looks at text, only at integer token IDs in ``[0, vocabulary)``.
"""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Document(Protocol):
    """Anything that can return its token IDs and a token count."""

    def token_set(self) -> Sequence[int]: ...
    def __len__(self) -> int: ...


class TokenSet(tuple):
    """
    Ordered sequence of token IDs for one document.

    Depending on the scoring algorithm it may be de-duplicated beforehand
    (see ``unique_tokens``); order is kept exactly as supplied.
    """

    def __new__(cls, tokens: Iterable[int] = ()):
        return super().__new__(cls, (int(t) for t in tokens))

    def token_set(self) -> "TokenSet":
        return self

    def __repr__(self) -> str:
        return f"TokenSet({list(self)!r})"


def unique_tokens(tokens: Iterable[int]) -> TokenSet:
    """Sorted, de-duplicated token IDs (input form expected by ``algorithm3``)."""
    return TokenSet(sorted(set(tokens)))
