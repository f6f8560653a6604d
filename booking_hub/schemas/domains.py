"""
Domain schemas — tenant configuration and resolution models.
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class DomainCarConfig(BaseModel):
    """Per-tenant override for one car in the catalog."""
    car_id: str
    price: Optional[float] = None
    is_visible: bool = True


class TenantConfig(BaseModel):
    """Row of the domains table."""
    id: str
    domain_name: str
    theme_id: Optional[str] = None
    cars: List[DomainCarConfig] = []
    is_active: bool = True


class ResolutionStatus(str, Enum):
    RESOLVED = "resolved"
    BYPASS = "bypass"
    UNAVAILABLE = "unavailable"


class TenantResolution(BaseModel):
    """Outcome of tenant resolution for one request."""
    status: ResolutionStatus
    tenant_key: Optional[str] = Field(
        None, description="Normalized hostname the lookup was made for"
    )
    config: Optional[TenantConfig] = None

    @property
    def is_available(self) -> bool:
        return self.status != ResolutionStatus.UNAVAILABLE

    @property
    def theme_id(self) -> Optional[str]:
        return self.config.theme_id if self.config else None
