"""Stellar Forge: deterministic procedural universe generation."""

from .utils.constants import VERSION

__version__ = VERSION
