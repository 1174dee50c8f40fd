"""Shared pytest fixtures for SObject definitions tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from sobject_defs.core.errors import DescribeError, RemoteServiceError
from sobject_defs.core.models import ObjectSummary
from sobject_defs.data import sf_api

GLOBAL_DESCRIBE = [
    {"name": "Account", "custom": False},
    {"name": "Contact", "custom": False},
    {"name": "Widget__c", "custom": True},
]

RAW_DESCRIBES = {
    "Account": {
        "name": "Account",
        "label": "Account",
        "custom": False,
        "fields": [
            {"name": "Name", "label": "Account Name", "type": "string", "referenceTo": []},
            {"name": "AnnualRevenue", "label": "Annual Revenue", "type": "currency", "referenceTo": []},
        ],
    },
    "Contact": {
        "name": "Contact",
        "label": "Contact",
        "custom": False,
        "fields": [
            {"name": "Email", "label": "Email", "type": "email", "referenceTo": []},
        ],
    },
    "Widget__c": {
        "name": "Widget__c",
        "label": "Widget",
        "custom": True,
        "fields": [
            {"name": "Quantity__c", "label": "Quantity", "type": "double", "referenceTo": []},
        ],
    },
}


class FakeOrg:
    """Stands in for the two remote describe calls."""

    def __init__(self, global_describe: list[dict], describes: dict[str, dict]):
        self.global_describe = global_describe
        self.describes = describes
        self.described: list[str] = []
        self.failures: dict[str, str] = {}
        self.list_error: Exception | None = None
        self.on_describe = None

    def list_sobjects(self, connection) -> list[ObjectSummary]:
        if self.list_error is not None:
            raise self.list_error
        return [ObjectSummary(s["name"], s["custom"]) for s in self.global_describe]

    def describe_object(self, connection, name: str):
        self.described.append(name)
        if self.on_describe is not None:
            self.on_describe(name)
        if name in self.failures:
            raise DescribeError(name, self.failures[name])
        if name not in self.describes:
            raise DescribeError(name, "404 Not Found")
        return sf_api.normalise(self.describes[name])


@pytest.fixture
def connection() -> sf_api.Connection:
    return sf_api.Connection("https://test.my.salesforce.com", "tok123", "60.0")


@pytest.fixture
def fake_org(monkeypatch) -> FakeOrg:
    org = FakeOrg(list(GLOBAL_DESCRIBE), dict(RAW_DESCRIBES))
    monkeypatch.setattr(sf_api, "list_sobjects", org.list_sobjects)
    monkeypatch.setattr(sf_api, "describe_object", org.describe_object)
    return org


@pytest.fixture
def project_dir(tmp_path) -> Path:
    (tmp_path / "sfdx-project.json").write_text('{"packageDirectories": [{"path": "force-app"}]}')
    return tmp_path


@pytest.fixture
def listing_failure() -> RemoteServiceError:
    return RemoteServiceError("Failed to list SObjects: 401 Unauthorized")
