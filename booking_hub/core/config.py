import json
import os
from typing import Optional
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel


load_dotenv()


class Settings(BaseModel):
    # Supabase (domains, cars, themes, bookings tables)
    supabase_url: str | None = os.getenv("SUPABASE_URL")
    supabase_service_role_key: str | None = os.getenv("SUPABASE_SERVICE_ROLE_KEY")

    # Exchange rates
    exchange_rate_api_url: str = os.getenv(
        "EXCHANGE_RATE_API_URL", "https://open.er-api.com/v6/latest"
    )
    rates_base_currency: str = os.getenv("RATES_BASE_CURRENCY", "USD")

    # Geolocation providers, tried in this order
    geo_ip_api_url: str = os.getenv("GEO_IP_API_URL", "http://ip-api.com/json")
    geo_ipapi_co_url: str = os.getenv("GEO_IPAPI_CO_URL", "https://ipapi.co")
    geo_ipinfo_url: str = os.getenv("GEO_IPINFO_URL", "https://ipinfo.io")

    # Applied to every outbound call; a timeout counts as a failure
    external_timeout_seconds: float = float(os.getenv("EXTERNAL_TIMEOUT_SECONDS", "5.0"))

    # Tenant resolution
    domain_lookup_max_attempts: int = int(os.getenv("DOMAIN_LOOKUP_MAX_ATTEMPTS", "3"))
    domain_lookup_backoff_seconds: float = float(os.getenv("DOMAIN_LOOKUP_BACKOFF_SECONDS", "0.25"))
    # Staging only. Lets ?allow_all=true skip tenant isolation.
    tenant_bypass_enabled: bool = os.getenv("TENANT_BYPASS_ENABLED", "false").lower() == "true"

    # PayPal
    paypal_client_id: Optional[str] = os.getenv("PAYPAL_CLIENT_ID")
    paypal_client_secret: Optional[str] = os.getenv("PAYPAL_CLIENT_SECRET")
    paypal_mode: str = os.getenv("PAYPAL_MODE", "sandbox")

    @property
    def paypal_api_url(self) -> str:
        """Get the PayPal REST base URL for the configured mode."""
        if self.paypal_mode == "live":
            return "https://api-m.paypal.com"
        return "https://api-m.sandbox.paypal.com"

    # Resend (booking e-mails)
    resend_api_key: Optional[str] = os.getenv("RESEND_API_KEY")
    resend_from_address: str = os.getenv("RESEND_FROM_ADDRESS", "bookings@example.com")
    booking_admin_email: Optional[str] = os.getenv("BOOKING_ADMIN_EMAIL")

    # CORS
    cors_allow_origins: list[str] = json.loads(os.getenv("CORS_ALLOW_ORIGINS", '["*"]'))


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = Settings()
