"""Command-line interface for DevAssist."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path

import click

from devassist import __version__
from devassist.assist import AssistReport, DevAssist
from devassist.config import (
    ProjectConfig,
    find_project_root,
    load_config,
    save_config,
    set_config_value,
)
from devassist.context import extract_record_id
from devassist.exceptions import DevAssistError
from devassist.inference import infer_paths
from devassist.models import RecordContext
from devassist.sources import StaticContextSource, create_pr_source
from devassist.ui.console import Console

console = Console()


def _get_project_root(path: str | None = None) -> Path:
    """Find the project root or error."""
    if path:
        root = Path(path).resolve()
        if not root.exists():
            console.error(f"Path does not exist: {path}")
            sys.exit(1)
        return root

    root = find_project_root()
    if root is None:
        console.error(
            "No DevAssist project found. Run 'devassist init' first, "
            "or specify a path with --path."
        )
        sys.exit(1)
    return root


def _load_project_config(path: str | None = None) -> ProjectConfig:
    """Load the project config, falling back to defaults outside a project."""
    if path:
        return load_config(_get_project_root(path))
    root = find_project_root()
    if root is None:
        return ProjectConfig()
    return load_config(root)


@click.group()
@click.version_option(version=__version__, prog_name="devassist")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """DevAssist - merged pull requests behind a Salesforce record's metadata."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option("--path", "-p", default=None, help="Path to the project root.")
@click.option("--owner", default=None, help="GitHub owner of the metadata repository.")
@click.option("--repo", default=None, help="GitHub name of the metadata repository.")
@click.option("--branch", default=None, help="Branch file links and lookups point at.")
@click.option("--base-url", default=None, help="Explicit base URL for file links.")
@click.option("--root", "roots", multiple=True, help="Source root (repeatable, in order).")
def init(
    path: str | None,
    owner: str | None,
    repo: str | None,
    branch: str | None,
    base_url: str | None,
    roots: tuple[str, ...],
):
    """Initialize DevAssist configuration for a project."""
    root = Path(path or ".").resolve()
    if not root.exists():
        console.error(f"Path does not exist: {root}")
        sys.exit(1)

    console.banner()
    console.info(f"Initializing DevAssist for: {root}")

    config = load_config(root)
    config.name = root.name
    config.root_path = str(root)

    if owner:
        config.repository.owner = owner
    if repo:
        config.repository.name = repo
    if branch:
        config.repository.branch = branch
    if base_url:
        config.repository.base_url = base_url
    if roots:
        config.inference.source_roots = list(roots)

    save_config(root, config)
    console.success("Configuration saved to .devassist/")

    if not config.repository.is_configured:
        console.warning(
            "No repository configured yet. Set one with "
            "'devassist config set repository.owner <owner>' and 'repository.name'."
        )


@main.command()
@click.argument("object_name")
@click.option("--record-type", "-r", default=None, help="Record type developer name.")
@click.option("--profile", "-u", default=None, help="Profile name of the viewing user.")
@click.option("--path", "-p", default=None, help="Path to the project root.")
@click.option("--json", "as_json", is_flag=True, help="Print paths as a JSON array.")
def paths(
    object_name: str,
    record_type: str | None,
    profile: str | None,
    path: str | None,
    as_json: bool,
):
    """Show the metadata paths inferred for an object."""
    config = _load_project_config(path)
    try:
        inferred = infer_paths(object_name, record_type, profile, config.inference.source_roots)
    except DevAssistError as e:
        console.error(str(e))
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(inferred, indent=2))
    else:
        console.show_paths(inferred)


@main.command()
@click.argument("object_name")
@click.option("--record-type", "-r", default=None, help="Record type developer name.")
@click.option("--profile", "-u", default=None, help="Profile name of the viewing user.")
@click.option("--path", "-p", default=None, help="Path to the project root.")
@click.option(
    "--format", "output_format",
    type=click.Choice(["table", "json", "markdown"]),
    default="table",
    help="Output format.",
)
@click.option("--dedupe", is_flag=True, help="List each pull request once, even if several paths matched it.")
def prs(
    object_name: str,
    record_type: str | None,
    profile: str | None,
    path: str | None,
    output_format: str,
    dedupe: bool,
):
    """Find merged pull requests touching an object's metadata.

    Usage:

        devassist prs Contact --record-type Support --profile Agent
    """
    config = _load_project_config(path)
    record = RecordContext(object_name=object_name, record_type=record_type)

    try:
        source = create_pr_source(config)
        assist = DevAssist(
            StaticContextSource(profile=profile, records={object_name: record}),
            source,
            config,
            dedupe=dedupe,
        )
        report = asyncio.run(_run(assist, object_name))
    except DevAssistError as e:
        console.error(str(e))
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps(report.to_dict(), indent=2, default=str))
    elif output_format == "markdown":
        from devassist.ui.markdown import render_report

        click.echo(render_report(report))
    else:
        console.show_report(report)


async def _run(assist: DevAssist, record_id: str) -> AssistReport:
    try:
        return await assist.run(record_id)
    finally:
        await assist.pr_source.aclose()


@main.command("record-id")
@click.argument("url")
def record_id(url: str):
    """Extract the record id from a Lightning record page URL."""
    found = extract_record_id(url)
    if found is None:
        console.error("No record id found in URL")
        sys.exit(1)
    click.echo(found)


@main.command("config")
@click.argument("action", type=click.Choice(["set", "get", "show"]))
@click.argument("key", required=False)
@click.argument("value", required=False)
@click.option("--path", "-p", default=None, help="Path to the project root.")
def config_cmd(action: str, key: str | None, value: str | None, path: str | None):
    """Manage DevAssist configuration."""
    root = _get_project_root(path)
    config = load_config(root)

    if action == "show":
        console.console.print_json(json.dumps(config.model_dump(), indent=2))
    elif action == "get":
        if not key:
            console.error("Usage: devassist config get <key>")
            sys.exit(1)
        data = config.model_dump()
        for part in key.split("."):
            if isinstance(data, dict) and part in data:
                data = data[part]
            else:
                console.error(f"Unknown key: {key}")
                sys.exit(1)
        click.echo(f"{key} = {data}")
    elif action == "set":
        if not key or value is None:
            console.error("Usage: devassist config set <key> <value>")
            sys.exit(1)
        try:
            # Try to parse as JSON for non-string values
            try:
                parsed_value = json.loads(value)
            except json.JSONDecodeError:
                parsed_value = value

            config = set_config_value(config, key, parsed_value)
            save_config(root, config)
            console.success(f"Set {key} = {parsed_value}")
        except KeyError:
            console.error(f"Unknown config key: {key}")
            sys.exit(1)
        except ValueError as e:
            console.error(f"Invalid value for {key}: {e}")
            sys.exit(1)


if __name__ == "__main__":
    main()
