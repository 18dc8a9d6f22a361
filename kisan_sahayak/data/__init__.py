"""
Static reference tables for the KisanSahayak offline scheme engine
"""

from .scheme_data import (
    STATES,
    CROPS,
    REGIONAL_MULTIPLIERS,
    SCHEME_TEMPLATES,
    NATIONAL_SCHEMES,
    FALLBACK_SCHEME,
    get_regional_multiplier
)

__all__ = [
    "STATES",
    "CROPS",
    "REGIONAL_MULTIPLIERS",
    "SCHEME_TEMPLATES",
    "NATIONAL_SCHEMES",
    "FALLBACK_SCHEME",
    "get_regional_multiplier"
]
