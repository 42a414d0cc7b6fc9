# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the read-only metadata model consumed by the Runway parser.

The model describes what a CLI accepts: global options, optional command groups,
commands, their options, positional argument slots and a catch-all arguments
collection. It is built once by the host application and treated as immutable for
the lifetime of every parse; nothing in the parser ever mutates it.

Key Entities:
- `OptionMetadata`: A named option with an arity (0 = flag, 1+ = value count).
- `PositionalArgumentMetadata`: An argument bound by its declared position.
- `ArgumentsMetadata`: The vararg collection filled after positional slots.
- `CommandMetadata`: A command with its options and arguments.
- `CommandGroupMetadata`: A named collection of commands with shared options.
- `GlobalMetadata`: The root of the model.

An option is legal wherever the entity that declares it is in scope: global options
everywhere, group options inside the group and its commands, command options only
after the command.

Every option, positional slot and arguments collection carries a `kind`
(`TargetKind`) which restrictions dispatch on.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable

from runway.exceptions import MetadataError

if TYPE_CHECKING:
    from runway.parser.converter import TypeConverter
    from runway.restrictions.base import Restriction


class TargetKind(Enum):
    """The kind of entity a restriction is attached to."""

    OPTION = "option"
    ARGUMENTS = "arguments"
    POSITIONAL = "positional"

    def __str__(self) -> str:
        return self.value


def _freeze(instance: Any, name: str) -> None:
    object.__setattr__(instance, name, tuple(getattr(instance, name)))


@dataclass(frozen=True)
class OptionMetadata:
    """
    Describes a named option.

    Attributes:
        names (tuple[str, ...]): Every name the option answers to (e.g. `-v`, `--verbose`).
        title (str): Display title used in diagnostics.
        arity (int): Number of value tokens the option consumes. 0 means flag.
        type (Any): Target type for values.
        required (bool): True if the option must be supplied.
        restrictions (tuple[Restriction, ...]): Validation rules for each value.
        converter (TypeConverter | None): Converter overriding the parser default.
        description (str): Help text, carried for the host application.
        hidden (bool): True if the host should hide the option from help.
    """

    names: tuple[str, ...]
    title: str = ""
    arity: int = 1
    type: Any = str
    required: bool = False
    restrictions: tuple[Restriction, ...] = ()
    converter: TypeConverter | None = None
    description: str = ""
    hidden: bool = False

    def __post_init__(self) -> None:
        _freeze(self, "names")
        _freeze(self, "restrictions")
        if not self.names:
            raise MetadataError("An option must declare at least one name")
        for name in self.names:
            if not isinstance(name, str) or not name:
                raise MetadataError(f"Option name {name!r} must be a non-empty string")
        if not isinstance(self.arity, int) or self.arity < 0:
            raise MetadataError(
                f"Option '{self.names[0]}' has invalid arity {self.arity!r}"
            )
        if not self.title:
            object.__setattr__(self, "title", self.names[0].lstrip("-"))
        if self.arity == 0 and self.type is str:
            object.__setattr__(self, "type", bool)

    @property
    def kind(self) -> TargetKind:
        return TargetKind.OPTION

    @property
    def display_name(self) -> str:
        return self.names[0]

    def matches(self, name: str) -> bool:
        return name in self.names


@dataclass(frozen=True)
class PositionalArgumentMetadata:
    """An argument bound by zero-based position."""

    position: int
    title: str
    type: Any = str
    required: bool = False
    restrictions: tuple[Restriction, ...] = ()
    converter: TypeConverter | None = None
    description: str = ""

    def __post_init__(self) -> None:
        _freeze(self, "restrictions")
        if not isinstance(self.position, int) or self.position < 0:
            raise MetadataError(
                f"Positional argument '{self.title}' has invalid position {self.position!r}"
            )

    @property
    def kind(self) -> TargetKind:
        return TargetKind.POSITIONAL


@dataclass(frozen=True)
class ArgumentsMetadata:
    """The catch-all arguments collection."""

    titles: tuple[str, ...] = ()
    type: Any = str
    required: bool = False
    restrictions: tuple[Restriction, ...] = ()
    converter: TypeConverter | None = None
    description: str = ""

    def __post_init__(self) -> None:
        _freeze(self, "titles")
        _freeze(self, "restrictions")

    @property
    def kind(self) -> TargetKind:
        return TargetKind.ARGUMENTS

    @property
    def title(self) -> str:
        return self.titles[0] if self.titles else "arguments"


def _check_unique_names(owner: str, entities: Iterable[Any]) -> None:
    seen: dict[str, str] = {}
    for entity in entities:
        for name in (entity.name, *entity.aliases):
            if name in seen:
                raise MetadataError(
                    f"{owner}: name '{name}' is used by both '{seen[name]}' and '{entity.name}'"
                )
            seen[name] = entity.name


@dataclass(frozen=True)
class CommandMetadata:
    """A command, its options and its arguments."""

    name: str
    description: str = ""
    aliases: tuple[str, ...] = ()
    options: tuple[OptionMetadata, ...] = ()
    positional_args: tuple[PositionalArgumentMetadata, ...] = ()
    arguments: ArgumentsMetadata | None = None

    def __post_init__(self) -> None:
        _freeze(self, "aliases")
        _freeze(self, "options")
        positional_args = sorted(self.positional_args, key=lambda arg: arg.position)
        positions = [arg.position for arg in positional_args]
        if len(set(positions)) != len(positions):
            raise MetadataError(
                f"Command '{self.name}' declares more than one positional argument "
                "at the same position"
            )
        object.__setattr__(self, "positional_args", tuple(positional_args))

    def matches(self, token: str) -> bool:
        return token == self.name or token in self.aliases


@dataclass(frozen=True)
class CommandGroupMetadata:
    """A named group of commands sharing a set of group options."""

    name: str
    description: str = ""
    aliases: tuple[str, ...] = ()
    options: tuple[OptionMetadata, ...] = ()
    commands: tuple[CommandMetadata, ...] = ()
    default_command: CommandMetadata | None = None

    def __post_init__(self) -> None:
        _freeze(self, "aliases")
        _freeze(self, "options")
        _freeze(self, "commands")
        _check_unique_names(f"Group '{self.name}'", self.commands)

    def matches(self, token: str) -> bool:
        return token == self.name or token in self.aliases

    def find_command(self, token: str) -> CommandMetadata | None:
        return next((command for command in self.commands if command.matches(token)), None)


@dataclass(frozen=True)
class GlobalMetadata:
    """Root of the metadata model."""

    name: str
    description: str = ""
    options: tuple[OptionMetadata, ...] = ()
    groups: tuple[CommandGroupMetadata, ...] = ()
    commands: tuple[CommandMetadata, ...] = ()
    default_command: CommandMetadata | None = None

    def __post_init__(self) -> None:
        _freeze(self, "options")
        _freeze(self, "groups")
        _freeze(self, "commands")
        _check_unique_names(f"CLI '{self.name}'", self.groups)
        _check_unique_names(f"CLI '{self.name}'", self.commands)

    def find_group(self, token: str) -> CommandGroupMetadata | None:
        return next((group for group in self.groups if group.matches(token)), None)

    def find_command(self, token: str) -> CommandMetadata | None:
        return next((command for command in self.commands if command.matches(token)), None)
