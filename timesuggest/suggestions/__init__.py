"""Time suggestion module.

This module provides:
- TimeSuggester: tokenizer plus ordered suggestion rules
- classify: number/word tokenizer for fuzzy time phrases
- guess_time: meridiem heuristic for bare hour numbers
- Label formatting helpers
"""

from timesuggest.suggestions.formatter import concise_time, precise_label
from timesuggest.suggestions.rules import RULES, guess_time
from timesuggest.suggestions.schemas import ClassifiedInput, TimeSuggestion
from timesuggest.suggestions.service import TimeSuggester, suggest
from timesuggest.suggestions.tokenizer import classify

__all__ = [
    "RULES",
    "ClassifiedInput",
    "TimeSuggester",
    "TimeSuggestion",
    "classify",
    "concise_time",
    "guess_time",
    "precise_label",
    "suggest",
]
