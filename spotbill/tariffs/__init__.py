"""Tariff schedules and their validation."""

from .schema import Tariff, load_tariff
from .validators import validate_tariff

__all__ = ["Tariff", "load_tariff", "validate_tariff"]
