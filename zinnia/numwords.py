"""Conversion of spoken English numbers into digits."""

from __future__ import annotations

import re

_UNITS = {
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5, "six": 6,
    "seven": 7, "eight": 8, "nine": 9, "ten": 10, "eleven": 11,
    "twelve": 12, "thirteen": 13, "fourteen": 14, "fifteen": 15,
    "sixteen": 16, "seventeen": 17, "eighteen": 18, "nineteen": 19,
}
_TENS = {
    "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
}
_SCALES = {"thousand": 1_000, "million": 1_000_000, "billion": 1_000_000_000}
_NUMBER_WORDS = frozenset(_UNITS) | frozenset(_TENS) | frozenset(_SCALES) | {"zero", "hundred"}
_DIGITS = re.compile(r"[0-9]+")


def _split_token(token: str) -> list[str]:
    return [part for part in token.lower().split("-") if part]


def _is_number_token(token: str) -> bool:
    parts = _split_token(token)
    return bool(parts) and all(part in _NUMBER_WORDS for part in parts)


def _parse_words(words: list[str]) -> int:
    if not words:
        raise ValueError("no number words")
    if words == ["zero"]:
        return 0
    total = 0
    current = 0
    group_empty = True
    last_scale: int | None = None
    for word in words:
        if word in _UNITS:
            value = _UNITS[word]
            if not group_empty:
                rest = current % 100
                after_hundred = rest == 0 and current >= 100
                after_tens = rest >= 20 and rest % 10 == 0 and value < 10
                if not (after_hundred or after_tens):
                    raise ValueError(f"unexpected {word!r}")
            current += value
        elif word in _TENS:
            if not group_empty and not (current % 100 == 0 and current >= 100):
                raise ValueError(f"unexpected {word!r}")
            current += _TENS[word]
        elif word == "hundred":
            if group_empty or current >= 100:
                raise ValueError("unexpected 'hundred'")
            current *= 100
        elif word in _SCALES:
            scale = _SCALES[word]
            if group_empty or (last_scale is not None and scale >= last_scale):
                raise ValueError(f"unexpected {word!r}")
            total += current * scale
            current = 0
            group_empty = True
            last_scale = scale
            continue
        else:
            raise ValueError(f"not a number word: {word!r}")
        group_empty = False
    return total + current


def text_to_digits(text: str) -> str:
    """Convert a phrase that is wholly a number into its digits.

    Raises ValueError when the phrase is not a single number.
    """
    tokens = text.split()
    if len(tokens) == 1 and _DIGITS.fullmatch(tokens[0]):
        return str(int(tokens[0]))
    words = [part for token in tokens for part in _split_token(token)]
    return str(_parse_words(words))


def replace_numbers_in_text(text: str) -> str:
    """Replace every spelled-out number in a phrase with its digits."""
    tokens = text.split()
    out: list[str] = []
    i = 0
    while i < len(tokens):
        if not _is_number_token(tokens[i]):
            out.append(tokens[i])
            i += 1
            continue
        run_end = i
        while run_end < len(tokens) and _is_number_token(tokens[run_end]):
            run_end += 1
        for end in range(run_end, i, -1):
            words = [part for token in tokens[i:end] for part in _split_token(token)]
            try:
                value = _parse_words(words)
            except ValueError:
                continue
            out.append(str(value))
            i = end
            break
        else:
            out.append(tokens[i])
            i += 1
    return " ".join(out)