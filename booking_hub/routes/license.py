"""
License routes — driving-licence format rules and validation.

Provides:
- GET  /license/formats/{country_code} – length rule for a country
- POST /license/validate               – validate a licence number
"""
from fastapi import APIRouter, Path

from booking_hub.schemas.licensing import (
    LicenseFormatRule,
    LicenseValidationRequest,
    LicenseValidationResult,
)
from booking_hub.services.license_service import get_license_format, validate_license

router = APIRouter(prefix="/license", tags=["license"])


@router.get("/formats/{country_code}", response_model=LicenseFormatRule)
async def license_format(country_code: str = Path(..., min_length=2, max_length=2)) -> LicenseFormatRule:
    return get_license_format(country_code)


@router.post("/validate", response_model=LicenseValidationResult)
async def license_validate(request: LicenseValidationRequest) -> LicenseValidationResult:
    """An invalid licence is a 200 with ``is_valid`` false, not an error."""
    return validate_license(request.license_number, request.country_code)
