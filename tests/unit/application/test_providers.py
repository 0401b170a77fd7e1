"""Unit tests for resource providers and their health checks."""

from __future__ import annotations

import asyncio

import pytest
from structlog.testing import capture_logs

from mp_access.application import AccountProvider, ApplicationProvider
from mp_access.config import AccessSettings
from mp_access.kernel.authz import Account, Application, Authorization
from mp_access.kernel.errors import ProviderError
from mp_access.testing import InMemoryDefinitionSource

_ACCOUNTS = [
    {"name": "prod", "cloudProvider": "aws", "permissions": {"READ": ["ops"], "WRITE": ["ops-admin"]}},
    {"name": "test", "cloudProvider": "aws"},
    {"name": "legacy", "requiredGroupMembership": ["Team-A"]},
]


def _provider(records=_ACCOUNTS, **kw) -> tuple[AccountProvider, InMemoryDefinitionSource]:
    source = InMemoryDefinitionSource(records)
    return AccountProvider(source, **kw), source


class TestGetAll:
    def test_parses_every_record(self) -> None:
        provider, _ = _provider()
        accounts = asyncio.run(provider.get_all())
        assert [a.name for a in accounts] == ["prod", "test", "legacy"]
        assert all(isinstance(a, Account) for a in accounts)

    def test_legacy_record_migrated(self) -> None:
        provider, _ = _provider()
        legacy = asyncio.run(provider.get_all())[2]
        assert legacy.permissions.get(Authorization.WRITE) == ("team-a",)

    def test_malformed_record_skipped(self) -> None:
        provider, _ = _provider(_ACCOUNTS + [{"name": "bad", "permissions": {"NOPE": ["x"]}}])
        with capture_logs() as logs:
            accounts = asyncio.run(provider.get_all())
        assert "bad" not in [a.name for a in accounts]
        assert len(accounts) == 3
        rejected = [e for e in logs if e["event"] == "resource_definition_rejected"]
        assert rejected[0]["resource"] == "bad"
        assert rejected[0]["log_level"] == "error"

    def test_source_failure_raises_provider_error(self) -> None:
        provider, source = _provider()
        source.fail_with(RuntimeError("inventory down"))
        with pytest.raises(ProviderError) as info:
            asyncio.run(provider.get_all())
        assert info.value.provider == "account"
        assert isinstance(info.value.__cause__, RuntimeError)

    def test_timeout_raises_provider_error(self) -> None:
        provider, source = _provider(timeout=0.01)
        source.delay(1.0)
        with pytest.raises(ProviderError):
            asyncio.run(provider.get_all())
        assert provider.healthy is False

    def test_application_provider(self) -> None:
        source = InMemoryDefinitionSource([{"name": "app", "permissions": {"EXECUTE": ["ci"]}}])
        apps = asyncio.run(ApplicationProvider(source).get_all())
        assert isinstance(apps[0], Application)
        assert apps[0].permissions.get(Authorization.EXECUTE) == ("ci",)


class TestFiltering:
    def test_restricted_by_group(self) -> None:
        provider, _ = _provider()
        names = [a.name for a in asyncio.run(provider.get_all_restricted(["OPS"]))]
        assert names == ["prod"]

    def test_restricted_by_legacy_group(self) -> None:
        provider, _ = _provider()
        names = [a.name for a in asyncio.run(provider.get_all_restricted({"team-a"}))]
        assert names == ["legacy"]

    def test_restricted_with_no_groups(self) -> None:
        provider, _ = _provider()
        assert asyncio.run(provider.get_all_restricted([])) == []

    def test_unrestricted(self) -> None:
        provider, _ = _provider()
        names = [a.name for a in asyncio.run(provider.get_all_unrestricted())]
        assert names == ["test"]


class TestProviderHealth:
    def test_unhealthy_before_first_fetch(self) -> None:
        provider, _ = _provider()
        status = asyncio.run(provider.health_check().check())
        assert status.healthy is False
        assert status.detail == "no successful fetch yet"

    def test_healthy_after_success(self) -> None:
        provider, _ = _provider()
        asyncio.run(provider.get_all())
        check = provider.health_check()
        assert check.name == "account_provider"
        status = asyncio.run(check.timed_check())
        assert status.healthy is True
        assert status.latency_ms >= 0

    def test_failure_then_recovery(self) -> None:
        provider, source = _provider()
        source.fail_with(RuntimeError("down"))
        with pytest.raises(ProviderError):
            asyncio.run(provider.get_all())
        status = asyncio.run(provider.health_check().check())
        assert status.healthy is False
        assert "down" in (status.detail or "")

        source.fail_with(None)
        asyncio.run(provider.get_all())
        assert provider.healthy is True
        assert provider.last_error is None


class TestFromSettings:
    def test_configured_timeout_applies(self) -> None:
        source = InMemoryDefinitionSource(_ACCOUNTS)
        source.delay(1.0)
        provider = AccountProvider.from_settings(source, AccessSettings(fetch_timeout_seconds=0.01))
        with pytest.raises(ProviderError) as info:
            asyncio.run(provider.get_all())
        assert isinstance(info.value.__cause__, asyncio.TimeoutError)
        assert provider.healthy is False

    def test_fetch_within_timeout(self) -> None:
        source = InMemoryDefinitionSource(_ACCOUNTS)
        provider = ApplicationProvider.from_settings(source, AccessSettings())
        assert isinstance(provider, ApplicationProvider)
        assert len(asyncio.run(provider.get_all())) == 3

    def test_bare_string_group_rejected(self) -> None:
        provider, _ = _provider()
        with pytest.raises(TypeError):
            asyncio.run(provider.get_all_restricted("ops"))  # type: ignore[arg-type]
