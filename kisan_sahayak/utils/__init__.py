"""
Utility functions for the KisanSahayak offline scheme engine
"""

from .currency import (
    format_inr,
    parse_inr,
    round_half_up
)
from .validators import (
    validate_farmer_profile_data,
    is_supported_region
)

__all__ = [
    "format_inr",
    "parse_inr",
    "round_half_up",
    "validate_farmer_profile_data",
    "is_supported_region"
]
