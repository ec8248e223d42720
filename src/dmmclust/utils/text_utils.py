"""
Minimal text-to-token helpers for demos and tests.

Tokenisation here is plain whitespace splitting; real pipelines are expected
to bring their own tokenizer and vocabulary.
"""

from typing import Dict, Iterable, List

from ..algorithms.documents import TokenSet, unique_tokens


def build_vocabulary(texts: Iterable[str]) -> Dict[str, int]:
    """
    Assign an integer ID to every whitespace token.

    IDs follow first appearance across ``texts``.
    """
    vocab: Dict[str, int] = {}
    for text in texts:
        for tok in text.split():
            if tok not in vocab:
                vocab[tok] = len(vocab)
    return vocab


def make_documents(
    texts: Iterable[str],
    vocabulary: Dict[str, int],
    allow_repeat: bool = False,
) -> List[TokenSet]:
    """
    Convert texts to token documents.

    Args:
        texts: Raw texts
        vocabulary: Token to ID mapping (see ``build_vocabulary``)
        allow_repeat: Keep repeated tokens (for ``algorithm4``). When False,
            tokens are de-duplicated and sorted (for ``algorithm3``).

    Raises:
        KeyError: If a token is missing from ``vocabulary``
    """
    docs = []
    for text in texts:
        ids = [vocabulary[tok] for tok in text.split()]
        docs.append(TokenSet(ids) if allow_repeat else unique_tokens(ids))
    return docs
