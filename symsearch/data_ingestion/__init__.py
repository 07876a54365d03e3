"""Corpus construction from external package data."""

from symsearch.data_ingestion.corpus import Corpus, build_corpus, link_for
from symsearch.data_ingestion.exceptions import CorpusError, CorpusValidationError
from symsearch.data_ingestion.loader import load_package_data
from symsearch.data_ingestion.validation import CorpusValidator, ValidationError

__all__ = [
    "Corpus",
    "build_corpus",
    "link_for",
    "load_package_data",
    "CorpusValidator",
    "ValidationError",
    "CorpusError",
    "CorpusValidationError",
]
