"""
server.py — FastMCP server exposing the SObject definitions refresh.

Thin wrapper only.  All business logic lives in core/ and data/.
"""
from __future__ import annotations

import logging

from fastmcp import FastMCP

from sobject_defs.config import load_settings
from sobject_defs.core.errors import SObjectDefinitionsError
from sobject_defs.core.generator import generate_sobjects
from sobject_defs.core.guard import RefreshGuard
from sobject_defs.core.models import Category
from sobject_defs.data import project, sf_api

logger = logging.getLogger(__name__)

_guard = RefreshGuard()

mcp = FastMCP(
    name="Salesforce SObject Definitions",
    instructions=(
        "Use refresh_sobject_definitions to regenerate the faux Apex classes under "
        "tools/sobjects in a Salesforce DX project after schema changes in the org, "
        "so the Apex Language Server can complete org-specific fields."
    ),
)


def run_refresh(project_dir: str, org: str | None = None, category: str = "all") -> str:
    """Run one refresh and return a text summary.  Errors become the summary."""
    warnings: list[str] = []

    def on_progress(event) -> None:
        if event.kind == "warning":
            warnings.append(event.message)

    try:
        with _guard:
            settings = load_settings()
            root = project.find_project_root(project_dir)
            connection = sf_api.connect(org, settings=settings)
            result = generate_sobjects(
                connection,
                root,
                Category.parse(category),
                on_progress=on_progress,
                max_workers=settings.max_workers,
            )
    except (SObjectDefinitionsError, RuntimeError, ValueError) as e:
        logger.warning("Refresh failed: %s", e)
        return f"Failed to refresh SObject definitions: {e}"

    lines = [
        f"Generated {result.total_objects} SObject definitions "
        f"({result.standard_objects} standard, {result.custom_objects} custom) in {root}."
    ]
    lines.extend(warnings)
    return "\n".join(lines)


@mcp.tool
def refresh_sobject_definitions(project_dir: str, org: str | None = None, category: str = "all") -> str:
    """Regenerate faux Apex SObject classes for code completion.

    category is one of all, custom, standard.  org is an sf CLI alias; when
    omitted the env session or the CLI default org is used.
    """
    return run_refresh(project_dir, org, category)


if __name__ == "__main__":
    mcp.run()
