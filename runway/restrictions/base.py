# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Base class and dispatch helpers for restrictions.

A restriction is a validation rule attached to an option, a positional argument or
the arguments collection. It may validate the raw token before conversion
(`pre_validate`), the typed value after conversion (`post_validate`), or both.

Restrictions dispatch on `target.kind` (a `TargetKind`) rather than on the Python
class of the target, so one implementation serves every kind it supports.

Contract:
- Deterministic and side-effect free; the `ParseState` argument is read-only and is
  only consulted for diagnostics.
- Misconfiguration (unsupported target kind, incompatible value type) raises
  `ParseInvalidRestrictionError`, which is never routed to an `ErrorHandler`.
- A value that breaks the rule raises a `ParseRestrictionViolatedError` subclass,
  which the caller routes to the active `ErrorHandler`.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from runway.exceptions import ParseInvalidRestrictionError
from runway.model import TargetKind

if TYPE_CHECKING:
    from runway.parser.state import ParseState


def describe_target(state: ParseState | None, target: Any) -> str:
    """Return a human readable description of a restriction target."""
    kind = target.kind
    if kind == TargetKind.OPTION:
        return f"Option '{target.display_name}'"
    elif kind == TargetKind.POSITIONAL:
        return f"Positional argument {target.position} ('{target.title}')"
    elif kind == TargetKind.ARGUMENTS:
        title = target.title
        if state is not None and target.titles:
            index = len(state.parsed_arguments)
            title = target.titles[min(index, len(target.titles) - 1)]
        return f"Argument '{title}'"
    raise ParseInvalidRestrictionError(f"Unknown restriction target kind: {kind!r}")


class Restriction:
    """
    Base class for all restrictions.

    Subclasses override `pre_validate` and/or `post_validate` and narrow `targets`
    to the target kinds they support.
    """

    targets: frozenset[TargetKind] = frozenset(TargetKind)

    def supports(self, kind: TargetKind) -> bool:
        return kind in self.targets

    def check_target(self, target: Any) -> None:
        """Raise `ParseInvalidRestrictionError` if `target` is an unsupported kind."""
        if not self.supports(target.kind):
            raise ParseInvalidRestrictionError(
                f"{type(self).__name__} cannot be applied to {describe_target(None, target)} "
                f"(target kind '{target.kind}')"
            )

    def pre_validate(self, state: ParseState | None, target: Any, raw: Any) -> None:
        """Validate the raw token before conversion."""

    def post_validate(self, state: ParseState | None, target: Any, value: Any) -> None:
        """Validate the typed value after conversion."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
