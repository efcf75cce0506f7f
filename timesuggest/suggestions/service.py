"""Suggestion service.

Turns a fuzzy time phrase ("3pm", "next tue", "march 3", "in 5 days")
into candidate future instants for autocomplete.
"""

from collections.abc import Callable
from datetime import datetime

import structlog

from timesuggest.calendar.engine import CalendarEngine
from timesuggest.suggestions.formatter import precise_label
from timesuggest.suggestions.rules import RULES, Rule
from timesuggest.suggestions.schemas import TimeSuggestion
from timesuggest.suggestions.tokenizer import classify

logger = structlog.get_logger()


class TimeSuggester:
    """Runs the suggestion rules over a classified phrase.

    The tokenizer runs once per call; every rule then runs against its
    output and contributes suggestions in rule order. The precise label
    is filled in for all suggestions in a final pass.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        rules: list[Rule] | None = None,
    ):
        """Initialize suggester.

        Args:
            clock: Returns the current instant when a call gives no ``now``.
            rules: Rules to evaluate, in order. Defaults to RULES.
        """
        self._clock = clock
        self._rules = rules if rules is not None else RULES

    def suggest(self, text: str, now: datetime | None = None) -> list[TimeSuggestion]:
        """Suggest future instants a phrase might refer to.

        Args:
            text: Raw user input
            now: Reference instant. Defaults to the suggester's clock.

        Returns:
            Suggestions in rule-evaluation order. Empty if nothing matched.
        """
        engine = CalendarEngine(now or self._clock())
        fields = classify(text)

        results: list[TimeSuggestion] = []
        for rule in self._rules:
            results.extend(rule(fields, engine))

        for suggestion in results:
            suggestion.precise = precise_label(engine, suggestion.date)

        logger.debug(
            "suggested times",
            text=text,
            word=fields.word,
            suggestion_count=len(results),
        )
        return results


_default_suggester = TimeSuggester()


def suggest(text: str, now: datetime | None = None) -> list[TimeSuggestion]:
    """Suggest future instants for a phrase using the default suggester."""
    return _default_suggester.suggest(text, now=now)
