from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from numrange.exceptions import (
    AmbiguousRange,
    InvalidRangeSyntax,
    InvalidSeparator,
    NotANumber,
    SeparatorsMustBeDifferent,
    StartBiggerThanEnd,
)
from numrange.numeric import NumericRegistry, Steppable

if TYPE_CHECKING:
    from numrange.config import RangeOptions

log = logging.getLogger(__name__)

VALUE_SEPARATOR = ","
RANGE_SEPARATOR = "-"
SIGN = "-"


def parse(range_str: str, kind: str | type = int) -> list[Any]:
    """Expand a range expression using `,` between values and `-` in ranges.

    Examples:
        parse("1-3,5-8") -> [1, 2, 3, 5, 6, 7, 8]
        parse("-8,-5--1,0-3,-1") -> [-8, -5, -4, -3, -2, -1, 0, 1, 2, 3, -1]
        parse("-1.0-1.0", float) -> [-1.0, 0.0, 1.0]
    """
    numeric = NumericRegistry.resolve(kind)
    return _expand_parts(range_str, VALUE_SEPARATOR, RANGE_SEPARATOR, numeric)


def parse_with(
    range_str: str,
    value_separator: str,
    range_separator: str,
    kind: str | type = int,
) -> list[Any]:
    """Expand a range expression with caller-supplied separators.

    Example:
        parse_with("-2;0..3;-1;7", ";", "..") -> [-2, 0, 1, 2, 3, -1, 7]
    """
    if value_separator == range_separator:
        raise SeparatorsMustBeDifferent()
    for separator in (value_separator, range_separator):
        if not separator:
            raise InvalidSeparator(separator)

    numeric = NumericRegistry.resolve(kind)
    return _expand_parts(range_str, value_separator, range_separator, numeric)


def parse_options(range_str: str, options: RangeOptions) -> list[Any]:
    """Expand a range expression using separators and kind from options."""
    return parse_with(
        range_str,
        options.value_separator,
        options.range_separator,
        kind=options.kind,
    )


def _expand_parts(
    range_str: str,
    value_separator: str,
    range_separator: str,
    numeric: type[Steppable],
) -> list[Any]:
    values: list[Any] = []
    for part in range_str.split(value_separator):
        _parse_part(values, part, range_separator, numeric)
    return values


def _parse_part(
    acc: list[Any], part: str, range_separator: str, numeric: type[Steppable]
):
    if range_separator not in part:
        acc.append(_parse_number(part, numeric))
        return

    fragments = part.split(range_separator)
    if len(fragments) == 2 and fragments[0] == "":
        # The only separator is the sign of a single negative number
        acc.append(_parse_number(SIGN + fragments[1], numeric))
        return

    start, end = _resolve_bounds(part, fragments, numeric)
    if start > end:
        raise StartBiggerThanEnd(part)
    if not numeric.can_step(start, end):
        raise InvalidRangeSyntax(part)

    log.debug("Expanding %r as %r..%r (%s)", part, start, end, numeric.name)
    _expand(acc, part, start, end, numeric)


def _resolve_bounds(
    part: str, fragments: list[str], numeric: type[Steppable]
) -> tuple[Any, Any]:
    """Work out which separators divide the range and which are signs.

    The leading fragment is empty exactly when the part starts with the
    separator, which can then only be the sign of the start:

        1-3     ['1', '3']            1 .. 3
        -1-3    ['', '1', '3']        -1 .. 3
        1-3-5   ['1', '3', '5']       ambiguous
        -5--1   ['', '5', '', '1']    -5 .. -1

    Four fragments are always read as that last shape, whatever sits in
    the first and third fragment.
    """
    leading_sign = fragments[0] == ""

    if len(fragments) == 2:
        return (
            _parse_number(fragments[0], numeric),
            _parse_number(fragments[1], numeric),
        )
    if len(fragments) == 3 and leading_sign:
        return (
            _parse_number(SIGN + fragments[1], numeric),
            _parse_number(fragments[2], numeric),
        )
    if len(fragments) == 3:
        # 1--3 would need a start above its end anyway
        raise AmbiguousRange(part)
    if len(fragments) == 4:
        return (
            _parse_number(SIGN + fragments[1], numeric),
            _parse_number(SIGN + fragments[3], numeric),
        )
    raise InvalidRangeSyntax(part)


def _expand(
    acc: list[Any], part: str, start: Any, end: Any, numeric: type[Steppable]
):
    value = start
    while value <= end:
        acc.append(value)
        following = numeric.step(value)
        if following == value:
            # Float precision ran out between start and end
            raise InvalidRangeSyntax(part)
        value = following


def _parse_number(fragment: str, numeric: type[Steppable]) -> Any:
    try:
        return numeric.parse(fragment.strip())
    except (ValueError, OverflowError):
        raise NotANumber(fragment)
