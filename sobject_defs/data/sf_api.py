"""
sf_api.py — Salesforce REST API helpers used by the refresh pipeline.

Handles credential retrieval via the ``sf`` CLI and the two describe calls the
generator needs.  No Click, no file output — pure API I/O.
"""
from __future__ import annotations

import json
import logging
import subprocess
from dataclasses import dataclass

import requests

from sobject_defs.config import DEFAULT_API_VERSION, DEFAULT_HTTP_TIMEOUT, Settings
from sobject_defs.core.errors import DescribeError, RemoteServiceError
from sobject_defs.core.models import FieldDescriptor, ObjectDescription, ObjectSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Connection:
    """An authenticated org session."""

    instance_url: str
    access_token: str
    api_version: str = DEFAULT_API_VERSION
    timeout: int = DEFAULT_HTTP_TIMEOUT

    @property
    def base_url(self) -> str:
        return f"{self.instance_url.rstrip('/')}/services/data/v{normalise_api_version(self.api_version)}"

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}", "Accept": "application/json"}


def normalise_api_version(version: str) -> str:
    """Accept ``60.0`` or ``v60.0`` and return ``60.0``."""
    version = version.strip()
    if version[:1] in ("v", "V"):
        version = version[1:]
    if not version:
        raise ValueError("API version must not be empty")
    return version


def get_session(org_alias: str | None = None) -> tuple[str, str]:
    """Get ``(instance_url, access_token)`` from the Salesforce CLI.

    Runs ``sf org display -o <alias> --json``, or ``sf org display --json``
    for the CLI's default org when *org_alias* is ``None``.

    Raises:
        RuntimeError: If the sf CLI is not installed or the command fails.
    """
    cmd = ["sf", "org", "display", "--json"]
    if org_alias:
        cmd = ["sf", "org", "display", "-o", org_alias, "--json"]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=30)
    except FileNotFoundError:
        raise RuntimeError(
            "'sf' CLI not found. Install from "
            "https://developer.salesforce.com/tools/salesforcecli"
        )

    target = f"'{org_alias}'" if org_alias else "the default org"
    if result.returncode != 0:
        try:
            err_data = json.loads(result.stdout)
            msg = err_data.get("message", result.stderr)
        except (json.JSONDecodeError, KeyError, AttributeError):
            msg = result.stderr
        raise RuntimeError(f"sf org display failed for {target}: {msg}")

    data = json.loads(result.stdout)["result"]
    instance_url = data["instanceUrl"].rstrip("/")
    access_token = data["accessToken"]
    return instance_url, access_token


def connect(
    org_alias: str | None = None,
    api_version: str | None = None,
    settings: Settings | None = None,
) -> Connection:
    """Resolve a ``Connection``.

    Resolution order:
      1. ``sf org display -o <alias>`` when *org_alias* is given
      2. ``SF_INSTANCE_URL`` / ``SF_ACCESS_TOKEN`` from env / .env
      3. ``sf org display`` for the CLI's default org
    """
    settings = settings or Settings()
    version = normalise_api_version(api_version or settings.api_version)
    if org_alias:
        instance_url, token = get_session(org_alias)
    elif settings.has_env_session:
        instance_url, token = settings.instance_url, settings.access_token
    else:
        instance_url, token = get_session(None)
    logger.debug("Connected to %s (API v%s)", instance_url, version)
    return Connection(instance_url, token, version, settings.http_timeout)


def list_sobjects(connection: Connection) -> list[ObjectSummary]:
    """Fetch the global describe and return one summary per SObject.

    Raises:
        RemoteServiceError: On transport errors, error statuses, or a payload
            without an ``sobjects`` list.
    """
    url = f"{connection.base_url}/sobjects"
    try:
        resp = requests.get(url, headers=connection.headers, timeout=connection.timeout)
        resp.raise_for_status()
        sobjects = resp.json()["sobjects"]
        return [ObjectSummary(name=s["name"], custom=bool(s.get("custom", False))) for s in sobjects]
    except requests.RequestException as e:
        raise RemoteServiceError(f"Failed to list SObjects: {e}") from e
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise RemoteServiceError(f"Unexpected global describe response: {e!r}") from e


def describe_object(connection: Connection, api_name: str) -> ObjectDescription:
    """Fetch full describe metadata for a single SObject.

    Raises:
        DescribeError: If the API call fails or the payload is malformed.
    """
    url = f"{connection.base_url}/sobjects/{api_name}/describe"
    try:
        resp = requests.get(url, headers=connection.headers, timeout=connection.timeout)
        resp.raise_for_status()
        return normalise(resp.json())
    except requests.RequestException as e:
        raise DescribeError(api_name, str(e)) from e
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise DescribeError(api_name, f"unexpected describe response: {e!r}") from e


def normalise(raw: dict) -> ObjectDescription:
    """Transform a raw Salesforce describe into an ``ObjectDescription``."""
    fields = tuple(
        FieldDescriptor(
            name=f["name"],
            type=(f.get("type") or "").lower(),
            label=f.get("label") or None,
            reference_to=tuple(f.get("referenceTo") or ()),
        )
        for f in raw.get("fields") or []
    )
    return ObjectDescription(
        name=raw["name"],
        label=raw.get("label") or raw["name"],
        fields=fields,
    )
