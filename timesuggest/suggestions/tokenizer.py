"""Tokenizer for fuzzy time phrases.

Assumes the input holds one alphabetic "word" and zero or more numbers.
Numbers with a suffix (2nd, 8pm, 3:30) are taken as the type the suffix
says; bare numbers are kept as ambiguous digits for the rules to use
wherever they make sense.
"""

import re

from timesuggest.suggestions.schemas import ClassifiedInput

# number, optional minutes, optional meridiem or ordinal suffix
TOKEN_RE = re.compile(r"(\d+)([:.]\d*)?\s*(am?|pm?|st|nd|rd|th)?")

# connective "at" (or "a" while it is still being typed)
AT_RE = re.compile(r"\s+at?")

# number tokens with more digits than this are skipped
MAX_NUMBER_LENGTH = 9


def normalize(text: str) -> str:
    return text.strip().lower()


def _explicit_time(num: str, minute: str, suffix: str) -> str:
    """Build a clock time string like '3 pm' or '12:30 am'."""
    if minute:
        minute = minute.replace(".", ":")
        minute = minute + "0" * (3 - len(minute))
    # a bare "3:30" is assumed to be pm
    period = "am" if suffix.startswith("a") else "pm"
    return f"{num}{minute} {period}"


def scan_tokens(text: str) -> ClassifiedInput:
    """Classify every number token in a normalized phrase.

    Args:
        text: Normalized (trimmed, lowercased) input

    Returns:
        ClassifiedInput with explicit time, explicit day of month and
        ambiguous digits set; the residual word is left empty.
    """
    explicit_time = None
    day_of_month = None
    digits: list[int] = []

    for match in TOKEN_RE.finditer(text):
        num, minute, suffix = match.group(1), match.group(2) or "", match.group(3) or ""
        if len(num) > MAX_NUMBER_LENGTH or len(minute) > MAX_NUMBER_LENGTH:
            continue
        if minute or suffix.startswith(("a", "p")):
            explicit_time = _explicit_time(num, minute, suffix)
        elif not suffix:
            digits.append(int(num))
        else:
            day_of_month = int(num)

    return ClassifiedInput(
        explicit_time=explicit_time,
        explicit_day_of_month=day_of_month,
        ambiguous_digits=digits,
    )


def residual_word(text: str) -> str:
    """Strip number tokens and a connective 'at' from a normalized phrase."""
    word = TOKEN_RE.sub("", text).strip()
    return AT_RE.sub("", word, count=1)


def classify(text: str) -> ClassifiedInput:
    """Tokenize a raw input phrase.

    Examples:
        >>> classify("tmrw 8am").explicit_time
        '8 am'
        >>> classify("March 3rd").explicit_day_of_month
        3
    """
    normalized = normalize(text)
    fields = scan_tokens(normalized)
    return fields.model_copy(update={"word": residual_word(normalized)})
