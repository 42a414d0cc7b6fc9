"""
Runway CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .base import Restriction, describe_target
from .port import PortRange, PortRestriction, PortType
from .range import RangeRestriction, natural_order

__all__ = [
    "Restriction",
    "describe_target",
    "RangeRestriction",
    "natural_order",
    "PortRestriction",
    "PortRange",
    "PortType",
]
