#!/usr/bin/env python3
"""
cli.py — Click CLI for refreshing faux Apex SObject definitions.

Usage:
    python cli.py refresh
    python cli.py refresh --target-org myorg --sobject-category custom
    python cli.py refresh -o myorg --api-version 59.0 --json
    python cli.py refresh --project-dir ./force-app-project --max-workers 4
"""
from __future__ import annotations

import json
import logging

import click

from sobject_defs.config import load_settings
from sobject_defs.core.generator import generate_sobjects
from sobject_defs.core.guard import RefreshGuard
from sobject_defs.core.models import Category, ProgressEvent
from sobject_defs.data import project, sf_api

# Shared by every invocation in this process.
REFRESH_GUARD = RefreshGuard()


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@click.group()
def cli() -> None:
    """Salesforce SObject definitions CLI."""


@cli.command()
@click.option("--target-org", "-o", "org_alias", default=None, envvar="SF_TARGET_ORG",
              help="Org alias or username. Defaults to SF_INSTANCE_URL/SF_ACCESS_TOKEN, "
                   "then the sf CLI default org.")
@click.option("--sobject-category", "-s", "category", default="all", show_default=True,
              type=click.Choice([c.value for c in Category], case_sensitive=False),
              help="Which SObjects to generate definitions for.")
@click.option("--api-version", default=None, help="Override the API version (e.g. 60.0).")
@click.option("--project-dir", default=None, type=click.Path(file_okay=False),
              help="Salesforce DX project root. Discovered from the current directory if omitted.")
@click.option("--max-workers", default=None, type=click.IntRange(min=1),
              help="Maximum concurrent describe calls.")
@click.option("--timeout", default=None, type=click.FloatRange(min=0),
              help="Cancel remaining describes after this many seconds.")
@click.option("--json", "json_output", is_flag=True, help="Output the result as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def refresh(
    org_alias: str | None,
    category: str,
    api_version: str | None,
    project_dir: str | None,
    max_workers: int | None,
    timeout: float | None,
    json_output: bool,
    verbose: bool,
) -> None:
    """Refresh the faux Apex classes used for SObject code completion."""
    setup_logging(verbose)

    def on_progress(event: ProgressEvent) -> None:
        if event.kind == "done" or json_output:
            return
        click.echo(event.message, err=event.kind == "warning")

    try:
        with REFRESH_GUARD:
            settings = load_settings()
            root = project.find_project_root(project_dir)
            connection = sf_api.connect(org_alias, api_version, settings)
            result = generate_sobjects(
                connection,
                root,
                Category.parse(category),
                on_progress=on_progress,
                max_workers=max_workers or settings.max_workers,
                timeout=timeout,
            )
    except Exception as e:
        raise click.ClickException(f"Failed to refresh SObject definitions: {e}")

    if json_output:
        click.echo(json.dumps({"success": not result.cancelled, **result.as_dict()}, indent=2))
        return
    if result.cancelled:
        click.echo(
            f"Refresh cancelled after {result.total_objects} SObject definitions "
            f"({result.standard_objects} standard, {result.custom_objects} custom).",
            err=True,
        )
        raise SystemExit(1)
    click.echo(
        f"Generated {result.total_objects} SObject definitions "
        f"({result.standard_objects} standard, {result.custom_objects} custom)."
    )
    if result.failed_objects:
        click.echo(f"{len(result.failed_objects)} SObject(s) failed: {', '.join(result.failed_objects)}", err=True)


if __name__ == "__main__":
    cli()
