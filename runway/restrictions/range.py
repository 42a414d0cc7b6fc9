# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Range restriction: the typed value must fall between optional bounds.

Bounds are compared with an injected total-order comparator
(`comparator(a, b) -> int`, negative/zero/positive like `cmp`), so any orderable
value type can be restricted. Both bounds absent makes the restriction a no-op.

Example:
    RangeRestriction(min=1, max=10)                       # [1, 10]
    RangeRestriction(min=0.0, min_inclusive=False)        # > 0.0
    RangeRestriction(min="a", max="m", comparator=by_len) # custom ordering
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from runway.exceptions import ParseInvalidRestrictionError, ParseOptionOutOfRangeError
from runway.restrictions.base import Restriction, describe_target

if TYPE_CHECKING:
    from runway.parser.state import ParseState

Comparator = Callable[[Any, Any], int]


def natural_order(left: Any, right: Any) -> int:
    """Compare two values using their natural ordering."""
    return (left > right) - (left < right)


class RangeRestriction(Restriction):
    """Restricts values to a range with independently inclusive/exclusive bounds."""

    def __init__(
        self,
        min: Any = None,
        max: Any = None,
        min_inclusive: bool = True,
        max_inclusive: bool = True,
        comparator: Comparator | None = None,
    ) -> None:
        self.min = min
        self.max = max
        self.min_inclusive = min_inclusive
        self.max_inclusive = max_inclusive
        self.comparator: Comparator = comparator or natural_order
        self.single_value = False

        if min is not None and max is not None:
            comparison = self._compare(min, max)
            if comparison > 0:
                raise ParseInvalidRestrictionError(
                    f"min ({min}) is greater than max ({max})"
                )
            if comparison == 0:
                if not min_inclusive or not max_inclusive:
                    raise ParseInvalidRestrictionError(
                        f"min ({min}) and max ({max}) compare as equal but "
                        "min_inclusive or max_inclusive is False, the range is empty"
                    )
                self.single_value = True

    def _compare(self, left: Any, right: Any) -> int:
        try:
            return self.comparator(left, right)
        except TypeError as error:
            raise ParseInvalidRestrictionError(
                f"Cannot compare {type(left).__name__} with {type(right).__name__} "
                f"in a range restriction: {error}"
            ) from error

    def in_range(self, value: Any) -> bool:
        if self.min is not None:
            comparison = self._compare(self.min, value)
            if comparison == 0:
                return self.min_inclusive
            if comparison > 0:
                return False
        if self.max is not None:
            comparison = self._compare(value, self.max)
            if comparison == 0:
                return self.max_inclusive
            if comparison > 0:
                return False
        return True

    def post_validate(self, state: ParseState | None, target: Any, value: Any) -> None:
        self.check_target(target)
        if self.min is None and self.max is None:
            return
        if not self.in_range(value):
            raise ParseOptionOutOfRangeError(
                describe_target(state, target),
                value,
                self.min,
                self.min_inclusive,
                self.max,
                self.max_inclusive,
            )

    def __repr__(self) -> str:
        return (
            f"RangeRestriction(min={self.min!r}, max={self.max!r}, "
            f"min_inclusive={self.min_inclusive}, max_inclusive={self.max_inclusive})"
        )
