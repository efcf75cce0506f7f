"""Schemas for time suggestions.

Defines the suggestion returned to callers and the intermediate
classification record the tokenizer hands to the suggestion rules.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TimeSuggestion(BaseModel):
    """A candidate interpretation of a fuzzy time phrase."""

    natural: str = Field(
        description="Short human-readable label (e.g. 'tomorrow, 3 pm')"
    )
    precise: str | None = Field(
        default=None,
        description="Unambiguous label with weekday, month, day and time",
    )
    date: datetime = Field(description="Resolved instant")


class ClassifiedInput(BaseModel):
    """Fields extracted from a raw input phrase.

    Digit runs carrying a minute component or an am/pm suffix become the
    explicit time, ordinal runs (3rd, 21st) the explicit day of month,
    and bare runs are kept in order as ambiguous digits. Whatever
    alphabetic text remains is the residual word.
    """

    model_config = ConfigDict(frozen=True)

    explicit_time: str | None = Field(
        default=None,
        description="Clock time with meridiem, e.g. '3 pm' or '12:30 pm'",
    )
    explicit_day_of_month: int | None = Field(
        default=None,
        description="Day of month from an ordinal token",
    )
    ambiguous_digits: list[int] = Field(
        default_factory=list,
        description="Suffix-less numbers in order of appearance",
    )
    word: str = Field(default="", description="Residual alphabetic word")

    @property
    def primary_digit(self) -> int | None:
        """First ambiguous digit, the main quantity or hour."""
        return self.ambiguous_digits[0] if self.ambiguous_digits else None

    @property
    def secondary_digit(self) -> int | None:
        """Second ambiguous digit, the fallback hour for month/day phrases."""
        return self.ambiguous_digits[1] if len(self.ambiguous_digits) > 1 else None
