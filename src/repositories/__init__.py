"""Corpus sources for the standings loader."""

from repositories.corpus import load_match_data_json, parse_match_data
from repositories.corpus_repository import fetch_match_data

__all__ = [
    "fetch_match_data",
    "load_match_data_json",
    "parse_match_data",
]
