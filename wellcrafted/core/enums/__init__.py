"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from wellcrafted.core.enums import Environment, ViolationCode
"""

from wellcrafted.core.enums.environment import Environment
from wellcrafted.core.enums.violation_code import ViolationCode

__all__ = ["Environment", "ViolationCode"]
