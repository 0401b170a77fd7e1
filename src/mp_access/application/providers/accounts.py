"""Application providers – accounts and applications."""
from __future__ import annotations

from typing import Any, Mapping

from mp_access.application.providers.provider import ResourceProvider
from mp_access.kernel.authz import (
    Account,
    Application,
    account_from_record,
    application_from_record,
)


class AccountProvider(ResourceProvider[Account]):
    kind = "account"

    def parse(self, record: Mapping[str, Any]) -> Account:
        return account_from_record(record)


class ApplicationProvider(ResourceProvider[Application]):
    kind = "application"

    def parse(self, record: Mapping[str, Any]) -> Application:
        return application_from_record(record)


__all__ = ["AccountProvider", "ApplicationProvider"]
