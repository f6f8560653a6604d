import logging

from supabase import create_client, Client

from booking_hub.core.config import Settings
from booking_hub.core.exceptions import ConfigStoreError

logger = logging.getLogger("supabase_client")


class SupabaseClient:
    """Lazy holder for the service-role Supabase client shared by all stores.

    Construction never fails. A missing URL or key surfaces as
    ConfigStoreError on first use so tenant lookups fail closed instead
    of crashing the request.
    """

    def __init__(self, settings: Settings) -> None:
        self._url = settings.supabase_url
        self._key = settings.supabase_service_role_key
        self._client: Client | None = None

    @property
    def configured(self) -> bool:
        return bool(self._url and self._key)

    @property
    def client(self) -> Client:
        if self._client is None:
            if not self.configured:
                raise ConfigStoreError(
                    "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set for the config store"
                )
            self._client = create_client(self._url, self._key)
            logger.info("supabase client initialized url=%s", self._url)
        return self._client
