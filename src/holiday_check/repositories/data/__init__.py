"""Bundled holiday tables."""

from .denmark_school_holidays import DENMARK_SCHOOL_HOLIDAYS

__all__ = ["DENMARK_SCHOOL_HOLIDAYS"]
