# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value conversion for Runway argument parsing.

This module turns raw command-line tokens into typed values. The `TypeConverter`
protocol is the seam the parser converts through; `DefaultTypeConverter` is the
stock implementation built on `coerce_value`.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string or raw value to an Enum instance.
- coerce_value: General-purpose coercion to a target type (including unions, enums, etc.).
"""
from __future__ import annotations

import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Protocol, Union, get_args, get_origin, runtime_checkable

from dateutil import parser as date_parser

from runway.exceptions import ParseConversionError

TRUE_STRINGS = {"true", "t", "1", "yes", "y", "on"}
FALSE_STRINGS = {"false", "f", "0", "no", "n", "off"}


def coerce_bool(value: Any) -> bool:
    """
    Convert a string to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes', '0', 'off', etc.

    Args:
        value (str): The input string or boolean.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the string is not a recognised boolean spelling.
    """
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in TRUE_STRINGS:
        return True
    elif normalized in FALSE_STRINGS:
        return False
    raise ValueError(f"'{value}' is not a valid boolean")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Convert a raw value or string to an Enum instance.

    Tries to resolve by name, value, or coerced base type.

    Args:
        value (Any): The input value to convert.
        enum_type (EnumMeta): The target Enum class.

    Returns:
        Enum: The corresponding Enum instance.

    Raises:
        ValueError: If the value cannot be resolved to a valid Enum member.
    """
    if isinstance(value, enum_type):
        return value

    if isinstance(value, str):
        try:
            return enum_type[value]
        except KeyError:
            pass

    base_type = type(next(iter(enum_type)).value)
    try:
        coerced_value = base_type(value)
        return enum_type(coerced_value)
    except (ValueError, TypeError):
        values = [str(enum.value) for enum in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


def coerce_value(value: Any, target_type: Any) -> Any:
    """
    Attempt to convert a raw token to the given target type.

    Handles complex typing constructs such as Union, Literal, Enum, and datetime.
    Values that are already instances of a plain target type are returned as-is.

    Args:
        value (Any): The raw token (usually a string).
        target_type (Any): The desired type or a callable converter.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails or the value is invalid.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        if value not in args:
            raise ValueError(
                f"Value '{value}' is not a valid literal for type {target_type}"
            )
        return value

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            if arg is type(None):
                continue
            try:
                return coerce_value(value, arg)
            except (ValueError, TypeError):
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if isinstance(target_type, type) and isinstance(value, target_type):
        return value

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"Value '{value}' could not be parsed as a datetime") from error

    return target_type(value)


@runtime_checkable
class TypeConverter(Protocol):
    """Converts a raw token into a value of `target_type`."""

    def convert(self, title: str, target_type: Any, raw: Any) -> Any: ...


class DefaultTypeConverter:
    """`TypeConverter` backed by `coerce_value`."""

    def convert(self, title: str, target_type: Any, raw: Any) -> Any:
        try:
            return coerce_value(raw, target_type)
        except (ValueError, TypeError) as error:
            raise ParseConversionError(title, raw, target_type, str(error)) from error

    def __repr__(self) -> str:
        return "DefaultTypeConverter()"
