"""Unit tests for access-controlled resources and views."""

from __future__ import annotations

import pytest

from mp_access.kernel.authz import (
    ALL_AUTHORIZATIONS,
    AccessControl,
    Account,
    Application,
    Authorization,
    PermissionsBuilder,
    ResourceType,
    View,
    to_view,
)


def _account() -> Account:
    permissions = (
        PermissionsBuilder()
        .add(Authorization.READ, "ops")
        .add(Authorization.WRITE, "ops-admin")
        .build()
    )
    return Account.create("prod", cloud_provider="aws", permissions=permissions)


class TestAccessControl:
    def test_defaults(self) -> None:
        ac = AccessControl("x")
        assert ac.permissions.is_empty()
        assert ac.authorizations == frozenset()

    def test_without_authorizations(self) -> None:
        ac = AccessControl("x", authorizations=frozenset({Authorization.READ}))
        assert ac.without_authorizations().authorizations == frozenset()


class TestAccount:
    def test_identity(self) -> None:
        account = _account()
        assert account.name == "prod"
        assert account.cloud_provider == "aws"
        assert account.resource_type is ResourceType.ACCOUNT

    def test_fresh_account_is_unevaluated(self) -> None:
        assert _account().authorizations == frozenset()

    def test_set_authorizations_returns_self(self) -> None:
        account = _account()
        assert account.set_authorizations({Authorization.READ}) is account
        assert account.authorizations == {Authorization.READ}

    def test_set_authorizations_copies_input(self) -> None:
        resolved = {Authorization.READ}
        account = _account().set_authorizations(resolved)
        resolved.add(Authorization.WRITE)
        assert account.authorizations == {Authorization.READ}

    def test_clone_keeps_identity_and_permissions(self) -> None:
        account = _account().set_authorizations({Authorization.READ})
        clone = account.clone_without_authorizations()
        assert clone is not account
        assert clone.name == account.name
        assert clone.cloud_provider == account.cloud_provider
        assert clone.permissions == account.permissions
        assert clone.authorizations == frozenset()

    def test_clone_isolation(self) -> None:
        original = _account().set_authorizations({Authorization.WRITE})
        clone = original.clone_without_authorizations()
        clone.set_authorizations(clone.permissions.get_authorizations({"ops"}))
        assert original.authorizations == {Authorization.WRITE}
        assert clone.authorizations == {Authorization.READ}


class TestApplication:
    def test_resource_type(self) -> None:
        assert Application.create("app").resource_type is ResourceType.APPLICATION

    def test_unrestricted_application_resolves_everything(self) -> None:
        app = Application.create("app")
        clone = app.clone_without_authorizations()
        clone.set_authorizations(clone.permissions.get_authorizations(set()))
        assert clone.get_view().authorizations == ALL_AUTHORIZATIONS


class TestView:
    def test_view_before_resolution_is_empty(self) -> None:
        view = _account().get_view()
        assert view.name == "prod"
        assert view.authorizations == frozenset()

    def test_view_carries_resolved_set(self) -> None:
        account = _account().set_authorizations({Authorization.READ})
        view = account.get_view()
        assert view == View("prod", ResourceType.ACCOUNT, frozenset({Authorization.READ}))
        assert view.allows(Authorization.READ)
        assert not view.allows(Authorization.WRITE)

    def test_view_has_no_group_data(self) -> None:
        payload = _account().set_authorizations({Authorization.READ}).get_view().to_dict()
        assert set(payload) == {"name", "authorizations"}
        assert "ops" not in repr(payload)

    def test_to_dict_orders_authorizations(self) -> None:
        view = View(
            "x",
            ResourceType.APPLICATION,
            frozenset({Authorization.CREATE, Authorization.READ, Authorization.WRITE}),
        )
        assert view.to_dict()["authorizations"] == ["READ", "WRITE", "CREATE"]

    def test_view_is_frozen(self) -> None:
        view = to_view(_account())
        with pytest.raises((AttributeError, TypeError)):
            view.name = "other"  # type: ignore[misc]

    def test_view_not_affected_by_later_resolution(self) -> None:
        account = _account().set_authorizations({Authorization.READ})
        view = account.get_view()
        account.set_authorizations(set())
        assert view.authorizations == {Authorization.READ}
