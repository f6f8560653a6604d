"""
License service — per-country driving-licence length validation.

Pure functions, no I/O. Only length is checked: licence formats vary too
much between countries for character-class rules to be reliable.
"""
import re
from typing import Optional

from booking_hub.core.constants.licensing import (
    DEFAULT_LICENSE_LENGTH,
    LICENSE_LENGTHS,
    LICENSE_REQUIRED_MESSAGE,
)
from booking_hub.schemas.licensing import LicenseFormatRule, LicenseValidationResult

_STRIP_RE = re.compile(r"[\s-]")


def _describe(min_length: int, max_length: int) -> str:
    if min_length == max_length:
        return f"{min_length} characters"
    return f"{min_length}-{max_length} characters"


def get_license_format(country_code: Optional[str]) -> LicenseFormatRule:
    """Rule for ``country_code``; the 6-20 International rule when unknown."""
    min_length, max_length, country_name = LICENSE_LENGTHS.get(
        (country_code or "").upper(), DEFAULT_LICENSE_LENGTH
    )
    return LicenseFormatRule(
        min_length=min_length,
        max_length=max_length,
        description=_describe(min_length, max_length),
        country_name=country_name,
    )


def validate_license(license_number: Optional[str], country_code: Optional[str]) -> LicenseValidationResult:
    rule = get_license_format(country_code)
    cleaned = _STRIP_RE.sub("", license_number or "")
    length = len(cleaned)

    if not cleaned:
        return LicenseValidationResult(is_valid=False, error_message=LICENSE_REQUIRED_MESSAGE)

    if length < rule.min_length:
        return LicenseValidationResult(
            is_valid=False,
            error_message=(
                f"{rule.country_name} license requires at least {rule.min_length} characters. "
                f"You entered {length}."
            ),
        )

    if length > rule.max_length:
        return LicenseValidationResult(
            is_valid=False,
            error_message=(
                f"{rule.country_name} license should be maximum {rule.max_length} characters. "
                f"You entered {length}."
            ),
        )

    return LicenseValidationResult(is_valid=True, error_message=None)
