"""Keyword-driven generators for flat lists of numbers."""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, Optional, Sequence, Union


class GeneratorError(ValueError):
    """Raised when generator arguments are missing or malformed."""


class VecKeyword(Enum):
    """Keywords understood by :func:`generate`."""

    RANGE = "range"
    LINSPACE = "linspace"
    ONES = "ones"
    ZEROS = "zeros"
    REPEAT = "repeat"
    BINARYPATTERN = "binarypattern"


def _number(value: object) -> float:
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return value
    raise GeneratorError(f"expected a number, got {value!r}")


def _floats(args: Iterable[object]) -> list[float]:
    return [float(_number(a)) for a in args]


def _ints(args: Iterable[object]) -> list[int]:
    return [int(_number(a)) for a in args]


def _round_half_away(value: float) -> int:
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def parse_keyword(args: Sequence[object]) -> Optional[VecKeyword]:
    """Return the keyword named by the first argument, or None if there is none."""
    if not args or not isinstance(args[0], str):
        return None
    try:
        return VecKeyword(args[0].lower())
    except ValueError:
        return None


def generate(keyword: Union[VecKeyword, str], args: Sequence[object]) -> list[float]:
    """Run the generator for ``keyword`` on ``args`` (which exclude the keyword itself)."""
    if isinstance(keyword, str):
        try:
            keyword = VecKeyword(keyword.lower())
        except ValueError:
            raise GeneratorError(f"Unknown keyword: {keyword}") from None
    dispatch = {
        VecKeyword.RANGE: parse_range,
        VecKeyword.LINSPACE: parse_linspace,
        VecKeyword.ONES: parse_ones,
        VecKeyword.ZEROS: parse_zeros,
        VecKeyword.REPEAT: parse_repeat,
        VecKeyword.BINARYPATTERN: parse_binary_pattern,
    }
    return dispatch[keyword](args)


def parse_range(args: Sequence[object]) -> list[float]:
    """Consecutive integers from ``<end>`` (start 0) or ``<start> <end>``, end exclusive.

    If start is larger than end the bounds are swapped.
    """
    values = _ints(args)
    if not values:
        raise GeneratorError('missing argument for message "range"')
    if len(values) == 1:
        if values[0] <= 0:
            raise GeneratorError('invalid argument for message "range"')
        start, end = 0, values[0]
    else:
        start, end = values[0], values[1]
    if start > end:
        start, end = end, start
    return [float(v) for v in range(start, end)]


def linspace(start: float, end: float, num: int, include_endpoint: bool = False) -> list[float]:
    """Return ``num`` evenly spaced values from ``start`` towards ``end``."""
    if num <= 0:
        return []
    if num == 1:
        return [float(start)]
    divisor = num - 1 if include_endpoint else num
    step = (end - start) / divisor
    values = [start + i * step for i in range(num)]
    if include_endpoint:
        values[-1] = float(end)
    return values


def parse_linspace(args: Sequence[object]) -> list[float]:
    """Accepts ``<num>``, ``<start> <end>``, ``<start> <end> <num>`` or
    ``<start> <end> <num> <include_endpoint>``."""
    values = _floats(args)
    if len(values) == 1:
        return linspace(0.0, 1.0, int(max(0.0, values[0])), False)
    if len(values) < 2:
        raise GeneratorError('too few arguments for message "linspace"')
    start, end = values[0], values[1]
    num = int(max(0.0, values[2])) if len(values) >= 3 else 10
    include_endpoint = bool(values[3]) if len(values) >= 4 else False
    return linspace(start, end, num, include_endpoint)


def _parse_count(args: Sequence[object], name: str) -> int:
    if not args:
        raise GeneratorError(f'too few arguments for message "{name}"')
    return max(0, int(_number(args[0])))


def parse_ones(args: Sequence[object]) -> list[float]:
    """A list of ``<num>`` ones."""
    return [1.0] * _parse_count(args, "ones")


def parse_zeros(args: Sequence[object]) -> list[float]:
    """A list of ``<num>`` zeros."""
    return [0.0] * _parse_count(args, "zeros")


def parse_repeat(args: Sequence[object]) -> list[float]:
    """``<num> <value>``: the value repeated num times."""
    if len(args) < 2:
        raise GeneratorError('too few arguments for message "repeat"')
    values = _floats(args)
    num = _round_half_away(max(0.0, values[0]))
    return [values[1]] * num


def parse_binary_pattern(args: Sequence[object]) -> list[float]:
    """``<num> <value1> <value2> ... <default_value>``: power-of-two spaced values.

    ``3 100 80`` gives ``100 80 80``; ``16 3 2 1 0`` gives
    ``3 0 0 0 1 0 0 0 2 0 0 0 1 0 0 0``.
    """
    if len(args) < 2:
        raise GeneratorError('too few arguments for message "binarypattern"')
    values = _floats(args)
    num = _round_half_away(max(0.0, values[0]))

    if num == 0:
        return []
    if num == 1:
        return [values[1]]

    has_default = len(values) > 2
    num_pattern_values = len(values) - 1 if has_default else len(values)
    default_value = values[-1] if has_default else 0.0
    pattern = values[1:num_pattern_values]

    result = [default_value] * num
    if not pattern:
        return result

    result[0] = pattern[0]
    for pattern_idx in range(len(pattern) - 1, 0, -1):
        interval = num // (1 << pattern_idx)
        if interval > 0:
            for pos in range(interval, num, interval * 2):
                result[pos] = pattern[pattern_idx]
    return result


def transposed(values: Iterable[float]) -> list[list[float]]:
    """Wrap each value in its own list; an empty input gives an empty list."""
    return [[v] for v in values]