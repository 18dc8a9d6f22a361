"""
Utility functions for validating farmer input before analysis
"""
from typing import List

from ..data.scheme_data import STATES


def validate_farmer_profile_data(profile_data: dict) -> List[str]:
    """
    Validate farmer profile data and return list of validation errors

    Type and range checks are done by the FarmerProfile model; this covers
    the form-level rules it cannot express.

    Args:
        profile_data: Dictionary containing profile data

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    location = profile_data.get('location') or {}
    for field in ['state', 'district']:
        value = location.get(field)
        if value is None or len(str(value).strip()) < 2:
            errors.append(f"{field.capitalize()} is required")

    crop_type = profile_data.get('crop_type')
    if crop_type is None or len(str(crop_type).strip()) < 2:
        errors.append("Crop type is required")

    if 'land_size_acres' in profile_data and profile_data['land_size_acres'] is not None:
        try:
            if float(profile_data['land_size_acres']) <= 0:
                errors.append("Land size must be a positive number")
        except (ValueError, TypeError):
            errors.append("Land size must be a valid number")

    if 'annual_income' in profile_data and profile_data['annual_income'] is not None:
        try:
            if float(profile_data['annual_income']) < 0:
                errors.append("Annual income cannot be negative")
        except (ValueError, TypeError):
            errors.append("Annual income must be a valid number")

    return errors


def is_supported_region(region: str) -> bool:
    """
    Check whether a region has region-specific pricing

    Args:
        region: State name as entered by the farmer

    Returns:
        True if the region is in the supported states catalog
    """
    return region in STATES
