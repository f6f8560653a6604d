"""
Licensing schemas — licence format rules and validation results.
"""
from typing import Optional

from pydantic import BaseModel, Field


class LicenseFormatRule(BaseModel):
    min_length: int
    max_length: int
    description: str
    country_name: str


class LicenseValidationRequest(BaseModel):
    license_number: str = Field(..., description="Licence number as typed by the driver")
    country_code: str = Field(..., min_length=2, max_length=2)


class LicenseValidationResult(BaseModel):
    is_valid: bool
    error_message: Optional[str] = None
