from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T", int, float)

INVALID_INPUT_MESSAGE = "Invalid input. Please try again."


def read_bounded(
    prompt: str,
    min_value: T,
    max_value: T,
    cast: Callable[[str], T] = float,
    *,
    reader: Callable[[str], str] = input,
    writer: Callable[[str], None] = print,
) -> T:
    """
    Reads until a value of type `cast` falls within [min_value, max_value].

    Malformed and out-of-range input is discarded and the prompt repeated.
    EOFError from `reader` is not treated as bad input and propagates.
    """
    while True:
        raw = reader(prompt)
        try:
            value = cast(raw.strip())
        except ValueError:
            writer(INVALID_INPUT_MESSAGE)
            continue
        if min_value <= value <= max_value:
            return value
        writer(INVALID_INPUT_MESSAGE)
