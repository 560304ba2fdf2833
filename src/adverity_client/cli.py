"""Command-line interface for interacting with an Adverity instance."""
from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

import typer

try:  # pragma: no cover - exercised in runtime environments
    from rich import box
    from rich.console import Console
    from rich.table import Table
except ImportError as exc:  # pragma: no cover - optional dependency guard
    raise RuntimeError(
        "The CLI requires Rich for table rendering. Install the CLI extras via "
        "'pip install adverity-client[cli]' to enable this command."
    ) from exc

from . import AdverityClient
from .cli_schema import CLI_TABLE_VIEWS, TableView
from .exceptions import AdverityError, ConfigurationError, RequestError
from .models import DatastreamScheduleConfig, WorkspaceConfig
from .parameters import Parameter

app = typer.Typer(help="Adverity management CLI.", no_args_is_help=True)

types_app = typer.Typer(help="Type catalog lookups.")
workspaces_app = typer.Typer(help="Workspace operations.")
datastreams_app = typer.Typer(help="Datastream operations.")
app.add_typer(types_app, name="types")
app.add_typer(workspaces_app, name="workspaces")
app.add_typer(datastreams_app, name="datastreams")

CATALOG_KINDS = ("connection", "authorization", "datastream", "destination")


def _build_client(
    instance_url: str,
    token: str,
    verify_ssl: bool,
    timeout: float,
) -> AdverityClient:
    if not token:
        raise typer.BadParameter("--token is required (or set ADVERITY_AUTH_TOKEN).")
    try:
        return AdverityClient(
            instance_url=instance_url,
            token=token,
            verify_ssl=verify_ssl,
            timeout=timeout,
        )
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2))


console = Console(force_terminal=False, color_system=None)


def _render_rich_table(view: TableView, rows: Sequence[Mapping[str, Any]]) -> None:
    table = Table(
        title=view.title,
        box=box.SIMPLE,
        show_lines=False,
        header_style="bold cyan",
    )
    for column in view.columns:
        table.add_column(column.header, justify=column.justify)
    ordered_rows = list(rows)
    if view.sort_key:
        ordered_rows.sort(key=view.sort_key)
    for row in ordered_rows:
        table.add_row(*(column.render(row) for column in view.columns))
    console.print(table)


def _present_output(payload: Any, *, view_id: str | None, json_output: bool) -> None:
    if json_output or view_id is None:
        _echo_json(payload)
        return
    view = CLI_TABLE_VIEWS.get(view_id)
    if not view:
        _echo_json(payload)
        return
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
        _echo_json(payload)
        return
    rows = [item for item in payload if isinstance(item, Mapping)]
    if not rows:
        _echo_json(payload)
        return
    _render_rich_table(view, rows)


def _handle_error(exc: AdverityError) -> None:
    if isinstance(exc, RequestError) and exc.status_code is not None:
        message = f"Request failed (status {exc.status_code}): {exc}"
    else:
        message = f"Request failed: {exc}"
    if exc.details and exc.details not in str(exc):
        message += f"\nDetails: {exc.details}"
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _shared_options() -> dict[str, Any]:  # pragma: no cover - helper indirection
    return {
        "instance_url": typer.Option(
            ...,
            "--instance-url",
            envvar="ADVERITY_INSTANCE_URL",
            help="Adverity instance URL (e.g. https://acme.datatap.adverity.com).",
        ),
        "token": typer.Option(
            ...,
            "--token",
            envvar="ADVERITY_AUTH_TOKEN",
            help="Adverity API token.",
        ),
        "verify_ssl": typer.Option(
            True,
            "--verify/--no-verify",
            envvar="ADVERITY_VERIFY_SSL",
            help="Enable or disable TLS certificate verification.",
            show_default=True,
        ),
        "timeout": typer.Option(30.0, help="Request timeout (seconds).", show_default=True),
        "output_json": typer.Option(
            False,
            "--json",
            "-j",
            help="Return raw JSON instead of rendering a table.",
        ),
    }


_SHARED_OPTIONS = _shared_options()


def _coerce_simple(value: str):
    v = value.strip()
    if not v:
        return ""
    low = v.lower()
    if low in {"true", "yes", "on"}:
        return True
    if low in {"false", "no", "off"}:
        return False
    if low in {"null", "none"}:
        return None
    try:
        if "." in v:
            return float(v)
        return int(v)
    except ValueError:
        return v


def parse_parameters(entries: Sequence[str]) -> list[Parameter]:
    """Turn repeated ``key=value`` options into parameters with simple coercion."""
    parameters: list[Parameter] = []
    for entry in entries:
        if "=" not in entry:
            raise typer.BadParameter(f"Parameters must be key=value pairs, got {entry!r}.")
        key, value = entry.split("=", 1)
        key = key.strip()
        if not key:
            raise typer.BadParameter(f"Parameter key is empty in {entry!r}.")
        parameters.append(Parameter(key=key, value=_coerce_simple(value)))
    return parameters


@types_app.command("list")
def types_list(
    kind: str = typer.Argument(..., help="One of: connection, authorization, datastream, destination."),
    search: str = typer.Option("", "--search", "-s", help="Search term sent to the catalog."),
    all_pages: bool = typer.Option(
        False,
        "--all-pages/--first-page",
        help="Follow pagination links instead of returning only the first page.",
        show_default=True,
    ),
    instance_url: str = _SHARED_OPTIONS["instance_url"],
    token: str = _SHARED_OPTIONS["token"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """Search a type catalog."""

    kind = kind.lower()
    if kind not in CATALOG_KINDS:
        raise typer.BadParameter(f"KIND must be one of: {', '.join(CATALOG_KINDS)}.")

    with _build_client(instance_url, token, verify_ssl, timeout) as client:
        catalog = {
            "connection": client.connection_types,
            "authorization": client.authorization_types,
            "datastream": client.datastream_types,
            "destination": client.destination_types,
        }[kind]
        try:
            items = catalog.query_all(search) if all_pages else catalog.query(search)
        except AdverityError as exc:
            _handle_error(exc)
            return

    _present_output(
        [item.to_dict() for item in items],
        view_id=f"types.{kind}",
        json_output=output_json,
    )


@workspaces_app.command("get")
def workspaces_get(
    slug: str = typer.Argument(..., help="Workspace slug."),
    instance_url: str = _SHARED_OPTIONS["instance_url"],
    token: str = _SHARED_OPTIONS["token"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Show a workspace."""

    with _build_client(instance_url, token, verify_ssl, timeout) as client:
        try:
            workspace = client.workspaces.read(slug)
        except AdverityError as exc:
            _handle_error(exc)
            return
    _echo_json(workspace.to_dict() if workspace else None)


@workspaces_app.command("create")
def workspaces_create(
    name: str = typer.Option(..., "--name", help="Workspace name."),
    datalake_id: int | None = typer.Option(None, "--datalake-id", help="Datalake identifier."),
    parent_id: int | None = typer.Option(None, "--parent-id", help="Parent workspace identifier."),
    param: list[str] = typer.Option(
        [],
        "--param",
        help="Extra API field in key=value form; overrides named options on collision.",
        show_default=False,
    ),
    instance_url: str = _SHARED_OPTIONS["instance_url"],
    token: str = _SHARED_OPTIONS["token"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Create a workspace."""

    config = WorkspaceConfig(
        name=name,
        datalake_id=datalake_id,
        parent_id=parent_id,
        parameters=parse_parameters(param) or None,
    )

    with _build_client(instance_url, token, verify_ssl, timeout) as client:
        try:
            workspace = client.workspaces.create(config)
        except AdverityError as exc:
            _handle_error(exc)
            return
    _echo_json(workspace.to_dict() if workspace else None)


@workspaces_app.command("delete")
def workspaces_delete(
    slug: str = typer.Argument(..., help="Workspace slug."),
    instance_url: str = _SHARED_OPTIONS["instance_url"],
    token: str = _SHARED_OPTIONS["token"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Delete a workspace."""

    with _build_client(instance_url, token, verify_ssl, timeout) as client:
        try:
            client.workspaces.delete(slug)
        except AdverityError as exc:
            _handle_error(exc)
            return
    typer.secho(f"Workspace '{slug}' deleted.", fg=typer.colors.GREEN)


@datastreams_app.command("get")
def datastreams_get(
    datastream_type_id: int = typer.Argument(..., help="Datastream type identifier."),
    datastream_id: int = typer.Argument(..., help="Datastream identifier."),
    instance_url: str = _SHARED_OPTIONS["instance_url"],
    token: str = _SHARED_OPTIONS["token"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Show a datastream."""

    with _build_client(instance_url, token, verify_ssl, timeout) as client:
        try:
            datastream = client.datastreams.read(datastream_type_id, datastream_id)
        except AdverityError as exc:
            _handle_error(exc)
            return
    _echo_json(datastream.to_dict() if datastream else None)


@datastreams_app.command("schedule")
def datastreams_schedule(
    datastream_id: int = typer.Argument(..., help="Datastream identifier."),
    enabled: bool = typer.Option(
        ...,
        "--enabled/--disabled",
        help="Enable or disable scheduled fetches.",
    ),
    instance_url: str = _SHARED_OPTIONS["instance_url"],
    token: str = _SHARED_OPTIONS["token"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Enable or disable a datastream's schedule."""

    config = DatastreamScheduleConfig(enabled=enabled)
    with _build_client(instance_url, token, verify_ssl, timeout) as client:
        try:
            datastream = client.datastreams.update_schedule(datastream_id, config)
        except AdverityError as exc:
            _handle_error(exc)
            return
    _echo_json(datastream.to_dict() if datastream else None)
