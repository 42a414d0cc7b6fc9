# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Port restriction: the typed value must be a valid TCP/UDP port.

A `PortRestriction` is configured with inclusive `PortRange`s and/or `PortType`
members. `PortType.ANY` acts as the "any port" sentinel. With no ranges configured
the restriction is a no-op.

Only integral values can be checked; booleans and non-integers are reported as
a misconfiguration of the command definition.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from runway.exceptions import ParseInvalidRestrictionError, ParseRestrictionViolatedError
from runway.restrictions.base import Restriction, describe_target

if TYPE_CHECKING:
    from runway.parser.state import ParseState

MIN_PORT = 0
MAX_PORT = 65535


@dataclass(frozen=True)
class PortRange:
    """An inclusive range of acceptable ports."""

    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ParseInvalidRestrictionError(
                f"Port range minimum ({self.minimum}) is greater than maximum ({self.maximum})"
            )
        if self.minimum < MIN_PORT or self.maximum > MAX_PORT:
            raise ParseInvalidRestrictionError(
                f"Port range {self.minimum}-{self.maximum} is outside {MIN_PORT}-{MAX_PORT}"
            )

    def in_range(self, port: int) -> bool:
        return self.minimum <= port <= self.maximum

    def __str__(self) -> str:
        if self.minimum == self.maximum:
            return str(self.minimum)
        return f"{self.minimum}-{self.maximum}"


class PortType(Enum):
    """Well known port ranges."""

    ANY = PortRange(MIN_PORT, MAX_PORT)
    SYSTEM = PortRange(1, 1023)
    USER = PortRange(1024, 49151)
    DYNAMIC = PortRange(49152, MAX_PORT)

    def in_range(self, port: int) -> bool:
        return self.value.in_range(port)

    def __str__(self) -> str:
        return f"{self.name.lower()} ({self.value})"


PortSpec = Union[PortRange, PortType]


def is_integral(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class PortRestriction(Restriction):
    """Restricts integral values to acceptable port ranges."""

    def __init__(self, *ranges: PortSpec) -> None:
        for port_range in ranges:
            if not isinstance(port_range, (PortRange, PortType)):
                raise ParseInvalidRestrictionError(
                    f"PortRestriction expects PortRange or PortType values, got {port_range!r}"
                )
        self.ranges: frozenset[PortSpec] = frozenset(ranges)

    @property
    def allows_any(self) -> bool:
        return PortType.ANY in self.ranges

    def ranges_text(self) -> str:
        if self.allows_any:
            return str(PortType.ANY)
        ordered = sorted(
            self.ranges,
            key=lambda entry: (entry.value if isinstance(entry, PortType) else entry).minimum,
        )
        return ", ".join(str(entry) for entry in ordered)

    def is_valid(self, port: int) -> bool:
        if port < MIN_PORT or port > MAX_PORT:
            return False
        if self.allows_any:
            return True
        return any(entry.in_range(port) for entry in self.ranges)

    def post_validate(self, state: ParseState | None, target: Any, value: Any) -> None:
        self.check_target(target)
        if not self.ranges:
            return
        if not is_integral(value):
            raise ParseInvalidRestrictionError(
                f"Cannot apply a port restriction to {describe_target(state, target)} "
                f"of type {type(value).__name__}"
            )
        if not self.is_valid(value):
            raise ParseRestrictionViolatedError(
                f"{describe_target(state, target)} which takes a port number was given "
                f"value '{value}' which is not in the range of acceptable ports: "
                f"{self.ranges_text()}"
            )

    def __repr__(self) -> str:
        return f"PortRestriction({self.ranges_text()})"
