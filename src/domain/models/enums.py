"""Enumerations used by the query descriptor."""

from enum import Enum


class PredicateKind(str, Enum):
    EQUAL = "equal"                                    # exact, case-sensitive
    CASE_INSENSITIVE_MATCH = "case_insensitive_match"  # ILIKE
