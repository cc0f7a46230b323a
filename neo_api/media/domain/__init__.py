"""Exercise naming rules."""

from .names import SPANISH_TO_ENGLISH, search_term_for

__all__ = ["SPANISH_TO_ENGLISH", "search_term_for"]
