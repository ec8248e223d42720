"""Utility modules for dmmclust."""

from .logging_config import get_logger, setup_logging
from .text_utils import build_vocabulary, make_documents

__all__ = [
    "get_logger",
    "setup_logging",
    "build_vocabulary",
    "make_documents",
]
