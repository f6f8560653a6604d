"""
Unit tests for domain_service — tenant key selection, resolution and overrides.

Tests cover:
- Tenant key precedence (override > embedded referrer > Host)
- Bypass gating on configuration
- Retry with backoff then fail-closed on store errors
- Missing / inactive tenants resolve UNAVAILABLE
- Catalog override semantics (price, visibility, default-to-show)
"""
import pytest
from unittest.mock import AsyncMock, patch

from booking_hub.core.exceptions import ConfigStoreError
from booking_hub.schemas.cars import CarCatalogEntry
from booking_hub.schemas.domains import ResolutionStatus, TenantConfig, TenantResolution
from booking_hub.services.domain_service import (
    BYPASS_TENANT_ID,
    DomainService,
    apply_tenant_overrides,
    determine_tenant_key,
)


@pytest.fixture
def service(mock_domain_store):
    return DomainService(mock_domain_store, max_attempts=3, backoff_seconds=0)


# --------------------------------------------------------------------------
# determine_tenant_key
# --------------------------------------------------------------------------

@pytest.mark.unit
class TestDetermineTenantKey:

    def test_host_only(self):
        assert determine_tenant_key("A.Example.com:8000") == "a.example.com"

    def test_override_wins(self):
        key = determine_tenant_key(
            "a.example.com", override="B.example.com", referrer="https://c.example.com/", embedded=True
        )
        assert key == "b.example.com"

    def test_referrer_used_when_embedded(self):
        key = determine_tenant_key("widget.host.com", referrer="https://Partner.example.com/book", embedded=True)
        assert key == "partner.example.com"

    def test_referrer_ignored_when_not_embedded(self):
        key = determine_tenant_key("widget.host.com", referrer="https://partner.example.com/")
        assert key == "widget.host.com"

    def test_unparseable_override_falls_through(self):
        assert determine_tenant_key("a.example.com", override="%%%") == "a.example.com"

    def test_unparseable_referrer_falls_through(self):
        key = determine_tenant_key("a.example.com", referrer="not a url", embedded=True)
        assert key == "a.example.com"

    def test_nothing_usable(self):
        assert determine_tenant_key(None) is None


# --------------------------------------------------------------------------
# apply_tenant_overrides
# --------------------------------------------------------------------------

@pytest.mark.unit
class TestApplyTenantOverrides:

    def test_documented_example(self, sample_cars, sample_tenant):
        effective = apply_tenant_overrides(sample_cars, sample_tenant)
        assert [(car.id, car.price) for car in effective] == [("c1", 199), ("c3", 80)]

    def test_no_override_defaults_to_visible(self, sample_cars):
        tenant = TenantConfig(id="t", domain_name="t.example.com", cars=[])
        effective = apply_tenant_overrides(sample_cars, tenant)
        assert [car.id for car in effective] == ["c1", "c2", "c3"]
        assert [car.price for car in effective] == [299, 150, 80]

    def test_inactive_tenant_gets_nothing(self, sample_cars, sample_tenant):
        tenant = sample_tenant.model_copy(update={"is_active": False})
        assert apply_tenant_overrides(sample_cars, tenant) == []

    def test_inactive_car_is_dropped_even_with_override(self, sample_cars, sample_tenant):
        cars = [sample_cars[0].model_copy(update={"is_active": False})] + sample_cars[1:]
        effective = apply_tenant_overrides(cars, sample_tenant)
        assert [car.id for car in effective] == ["c3"]

    def test_zero_override_price_keeps_base(self, sample_cars):
        tenant = TenantConfig(
            id="t", domain_name="t.example.com", cars=[{"car_id": "c3", "price": 0, "is_visible": True}]
        )
        effective = apply_tenant_overrides(sample_cars, tenant)
        assert next(car for car in effective if car.id == "c3").price == 80

    def test_rental_override_sets_price_per_day(self):
        rental = CarCatalogEntry(
            id="r1", car_type="rental", name="Yaris", type="Economy", price=40, price_per_day=40
        )
        tenant = TenantConfig(id="t", domain_name="t.example.com", cars=[{"car_id": "r1", "price": 35}])
        [car] = apply_tenant_overrides([rental], tenant)
        assert car.price == 35
        assert car.price_per_day == 35

    def test_input_is_not_mutated(self, sample_cars, sample_tenant):
        apply_tenant_overrides(sample_cars, sample_tenant)
        assert sample_cars[0].price == 299


# --------------------------------------------------------------------------
# DomainService.resolve
# --------------------------------------------------------------------------

@pytest.mark.unit
class TestResolve:

    @pytest.mark.asyncio
    async def test_resolved(self, service, mock_domain_store, sample_tenant):
        mock_domain_store.get_by_domain_name.return_value = sample_tenant

        result = await service.resolve("A.example.com")

        assert result.status == ResolutionStatus.RESOLVED
        assert result.tenant_key == "a.example.com"
        assert result.config == sample_tenant
        assert result.theme_id == "midnight-indigo"
        mock_domain_store.get_by_domain_name.assert_awaited_once_with("a.example.com")

    @pytest.mark.asyncio
    async def test_not_found_is_unavailable(self, service, mock_domain_store):
        result = await service.resolve("unknown.example.com")
        assert result.status == ResolutionStatus.UNAVAILABLE
        assert result.config is None
        assert result.is_available is False

    @pytest.mark.asyncio
    async def test_inactive_is_unavailable(self, service, mock_domain_store, sample_tenant):
        mock_domain_store.get_by_domain_name.return_value = sample_tenant.model_copy(update={"is_active": False})
        result = await service.resolve("a.example.com")
        assert result.status == ResolutionStatus.UNAVAILABLE

    @pytest.mark.asyncio
    async def test_no_key_skips_lookup(self, service, mock_domain_store):
        result = await service.resolve(None)
        assert result.status == ResolutionStatus.UNAVAILABLE
        mock_domain_store.get_by_domain_name.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_retries_then_succeeds(self, service, mock_domain_store, sample_tenant):
        mock_domain_store.get_by_domain_name.side_effect = [
            ConfigStoreError("boom"),
            sample_tenant,
        ]
        result = await service.resolve("a.example.com")
        assert result.status == ResolutionStatus.RESOLVED
        assert mock_domain_store.get_by_domain_name.await_count == 2

    @pytest.mark.asyncio
    async def test_store_failure_fails_closed_after_max_attempts(self, service, mock_domain_store):
        mock_domain_store.get_by_domain_name.side_effect = ConfigStoreError("down")
        result = await service.resolve("a.example.com")
        assert result.status == ResolutionStatus.UNAVAILABLE
        assert result.tenant_key == "a.example.com"
        assert mock_domain_store.get_by_domain_name.await_count == 3

    @pytest.mark.asyncio
    async def test_backoff_doubles(self, mock_domain_store):
        service = DomainService(mock_domain_store, max_attempts=3, backoff_seconds=0.5)
        mock_domain_store.get_by_domain_name.side_effect = ConfigStoreError("down")

        with patch("booking_hub.services.domain_service.asyncio.sleep", new=AsyncMock()) as mock_sleep:
            await service.resolve("a.example.com")

        assert [call.args[0] for call in mock_sleep.await_args_list] == [0.5, 1.0]

    @pytest.mark.asyncio
    async def test_allow_all_ignored_when_disabled(self, service, mock_domain_store):
        result = await service.resolve("unknown.example.com", allow_all=True)
        assert result.status == ResolutionStatus.UNAVAILABLE
        mock_domain_store.get_by_domain_name.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_allow_all_bypasses_when_enabled(self, mock_domain_store):
        service = DomainService(mock_domain_store, bypass_enabled=True)
        result = await service.resolve("anything.example.com", allow_all=True)
        assert result.status == ResolutionStatus.BYPASS
        assert result.config.id == BYPASS_TENANT_ID
        assert result.is_available is True
        mock_domain_store.get_by_domain_name.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_enabled_bypass_needs_the_flag(self, mock_domain_store, sample_tenant):
        service = DomainService(mock_domain_store, bypass_enabled=True)
        mock_domain_store.get_by_domain_name.return_value = sample_tenant
        result = await service.resolve("a.example.com")
        assert result.status == ResolutionStatus.RESOLVED


@pytest.mark.unit
class TestEffectiveCatalog:

    def test_unavailable_is_empty(self, sample_cars):
        resolution = TenantResolution(status=ResolutionStatus.UNAVAILABLE, tenant_key="x.example.com")
        assert DomainService.effective_catalog(sample_cars, resolution) == []

    def test_bypass_returns_active_cars_unmodified(self, sample_cars):
        cars = sample_cars + [sample_cars[0].model_copy(update={"id": "c4", "is_active": False})]
        resolution = TenantResolution(
            status=ResolutionStatus.BYPASS,
            config=TenantConfig(id=BYPASS_TENANT_ID, domain_name="*"),
        )
        effective = DomainService.effective_catalog(cars, resolution)
        assert [car.id for car in effective] == ["c1", "c2", "c3"]
        assert effective[0].price == 299

    def test_resolved_applies_overrides(self, sample_cars, sample_tenant):
        resolution = TenantResolution(
            status=ResolutionStatus.RESOLVED, tenant_key="a.example.com", config=sample_tenant
        )
        assert [car.id for car in DomainService.effective_catalog(sample_cars, resolution)] == ["c1", "c3"]
