"""
Main CLI entry point for dotspace.

Provides the command-line interface using Click. Every command loads a
YAML or JSON document, applies one namespace operation and prints the
result (or writes the document back with --in-place).
"""

import contextlib as _contextlib
import json as _json
import logging as _logging
import os as _os
import pathlib as _pathlib
import sys as _sys
import typing as _typing

import click as _click

import dotspace
import dotspace.config as config
import dotspace.documents as documents
import dotspace.namespace as namespace

_logger = _logging.getLogger(__name__)

CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}

_STDIN = "-"


def _configure_logging(level: str) -> None:
    """Send dotspace log records to stderr through rich."""
    import rich.console as _rich_console
    import rich.logging as _rich_logging

    handler = _rich_logging.RichHandler(
        console=_rich_console.Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(_logging.Formatter("%(name)s: %(message)s"))
    package_logger = _logging.getLogger("dotspace")
    package_logger.handlers = [handler]
    package_logger.setLevel(level)
    package_logger.propagate = False


@_contextlib.contextmanager
def _user_errors() -> _typing.Iterator[None]:
    """Report library errors as click errors (exit status 1)."""
    try:
        yield
    except (
        namespace.NamespaceError,
        documents.DocumentError,
        config.ConfigFileError,
    ) as e:
        _logger.debug("Command failed", exc_info=True)
        raise _click.ClickException(str(e)) from e


def _should_use_color(settings: config.Settings) -> tuple[bool, bool]:
    """Determine whether to use color output.

    Priority:
    1. --color / --no-color (or DOTSPACE_COLOR) if specified
    2. NO_COLOR env var (if set, disable color) - standard convention
    3. Auto-detect: color if stdout is a TTY

    Returns:
        Tuple of (color_enabled, force_color).
    """
    if settings.color is not None:
        return (settings.color, settings.color)
    if _os.environ.get("NO_COLOR") is not None:
        return (False, False)
    return (_sys.stdout.isatty(), False)


def _echo_value(ctx: _click.Context, value: _typing.Any) -> None:
    """Print a value in the configured format, highlighted when enabled."""
    settings: config.Settings = ctx.obj["settings"]
    text = documents.dump_value(
        value,
        settings.output_format,
        indent=settings.indent,
        sort_keys=settings.sort_keys,
    )
    color, force_color = _should_use_color(settings)
    if color:
        import rich.console as _rich_console
        import rich.syntax as _rich_syntax

        console = _rich_console.Console(
            force_terminal=force_color,
            no_color=False if force_color else None,
            color_system="truecolor" if force_color else "auto",
        )
        console.print(
            _rich_syntax.Syntax(
                text,
                settings.output_format,
                theme="monokai",
                background_color="default",
            )
        )
        return
    _click.echo(text)


def _input_format(ctx: _click.Context, source: str) -> str:
    explicit: str | None = ctx.obj["input_format"]
    if explicit:
        return explicit
    if source == _STDIN:
        return "yaml"
    return documents.detect_format(_pathlib.Path(source))


def _load(ctx: _click.Context, source: str) -> dict[str, _typing.Any]:
    """Load the document named on the command line ("-" reads stdin)."""
    fmt = _input_format(ctx, source)
    if source == _STDIN:
        text = _click.get_text_stream("stdin").read()
        return documents.parse_document(text, fmt, source="<stdin>")
    return documents.load_document(_pathlib.Path(source), fmt)


def _emit_document(
    ctx: _click.Context,
    source: str,
    data: dict[str, _typing.Any],
    in_place: bool,
) -> None:
    """Write the changed document back, or print it."""
    if not in_place:
        _echo_value(ctx, data)
        return
    if source == _STDIN:
        raise _click.UsageError("--in-place needs a file, not stdin")
    settings: config.Settings = ctx.obj["settings"]
    path = _pathlib.Path(source)
    documents.save_document(
        data,
        path,
        _input_format(ctx, source),
        indent=settings.indent,
        sort_keys=settings.sort_keys,
    )
    _logger.info("Wrote %s", path)


_file_argument = _click.argument("document", type=_click.Path(dir_okay=False, allow_dash=True))
_address_argument = _click.argument("address")
_in_place_option = _click.option(
    "-i",
    "--in-place",
    is_flag=True,
    help="Write the changed document back to DOCUMENT instead of printing it",
)


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(dotspace.__version__, "-v", "--version", prog_name="dotspace")
@_click.option("--verbose", is_flag=True, help="Enable debug logging on stderr")
@_click.option(
    "--input-format",
    type=_click.Choice(documents.FORMATS),
    default=None,
    help="Format of DOCUMENT (default: from file suffix, YAML for stdin)",
)
@_click.option(
    "--output-format",
    type=_click.Choice(documents.FORMATS),
    default=None,
    help="Format for printed output (default: from settings)",
)
@_click.option(
    "--color/--no-color",
    "use_color",
    default=None,
    help="Enable/disable syntax highlighting (default: auto-detect TTY)",
)
@_click.pass_context
def cli(
    ctx: _click.Context,
    verbose: bool,
    input_format: str | None,
    output_format: str | None,
    use_color: bool | None,
) -> None:
    """
    dotspace - read and write nested YAML/JSON documents by dotted address.

    \b
    Examples:
        dotspace get config.yaml server.port
        dotspace set -i config.yaml server.port 8080 --overwrite
        dotspace exists config.yaml database.password
        dotspace flatten config.yaml
        cat flat.json | dotspace --input-format json expand -
    """
    with _user_errors():
        settings = config.Settings()

    if output_format:
        settings.output_format = output_format  # type: ignore[assignment]
    if use_color is not None:
        settings.color = use_color
    if verbose:
        settings.log_level = "DEBUG"

    _configure_logging(settings.log_level)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["input_format"] = input_format


@cli.command()
@_file_argument
@_address_argument
@_click.option(
    "--default",
    "default",
    type=str,
    default=None,
    help="Print this (parsed as YAML) when nothing is stored at ADDRESS",
)
@_click.option("--message", type=str, default=None, help="Error message when ADDRESS is missing")
@_click.pass_context
def get(
    ctx: _click.Context,
    document: str,
    address: str,
    default: str | None,
    message: str | None,
) -> None:
    """Print the value stored at ADDRESS.

    Fails when nothing is stored there, unless --default is given.
    """
    with _user_errors():
        data = _load(ctx, document)
        if default is not None:
            value = namespace.get_if_exists(data, address, documents.parse_scalar(default))
        else:
            value = namespace.get_must_exist(data, address, message)
    _echo_value(ctx, value)


@cli.command()
@_file_argument
@_address_argument
@_click.pass_context
def exists(ctx: _click.Context, document: str, address: str) -> None:
    """Print whether anything (null included) is stored at ADDRESS.

    Exit status is 0 when it exists and 1 when it does not.
    """
    with _user_errors():
        found = namespace.exists(_load(ctx, document), address)
    _click.echo("true" if found else "false")
    if not found:
        ctx.exit(1)


@cli.command(name="set")
@_file_argument
@_address_argument
@_click.argument("value")
@_click.option("--overwrite", is_flag=True, help="Replace a value already stored at ADDRESS")
@_click.option("--dry-run", is_flag=True, help="Check the write without changing anything")
@_click.option(
    "--ignore-errors",
    is_flag=True,
    help="Skip the write instead of failing on occupied or blocked paths",
)
@_click.option(
    "--hard-write-hierarchy",
    is_flag=True,
    help="Replace non-mapping values on the way to ADDRESS with mappings",
)
@_in_place_option
@_click.pass_context
def set_cmd(
    ctx: _click.Context,
    document: str,
    address: str,
    value: str,
    overwrite: bool,
    dry_run: bool,
    ignore_errors: bool,
    hard_write_hierarchy: bool,
    in_place: bool,
) -> None:
    """Store VALUE (parsed as YAML) at ADDRESS.

    Refuses to replace an existing value unless --overwrite is given.
    """
    with _user_errors():
        data = _load(ctx, document)
        outcome = namespace.write(
            data,
            address,
            documents.parse_scalar(value),
            namespace.WriteOptions(
                overwrite=overwrite,
                dry_run=dry_run,
                ignore_errors=ignore_errors,
                hard_write_hierarchy=hard_write_hierarchy,
            ),
        )
        if outcome.status is namespace.WriteStatus.OCCUPIED:
            raise namespace.OverwriteError(address, outcome.existing)
        if outcome.status is namespace.WriteStatus.CONFLICT:
            raise namespace.HierarchyConflictError(
                address, outcome.segment or "", outcome.existing
            )
        if outcome.status is namespace.WriteStatus.SKIPPED:
            _click.echo(f"Skipped: nothing written to {address}", err=True)
            if dry_run:
                return
        _emit_document(ctx, document, data, in_place)


@cli.command()
@_file_argument
@_address_argument
@_in_place_option
@_click.pass_context
def delete(ctx: _click.Context, document: str, address: str, in_place: bool) -> None:
    """Remove the value stored at ADDRESS.

    A missing ADDRESS is reported on stderr but is not an error.
    """
    with _user_errors():
        data = _load(ctx, document)
        removed = namespace.remove(data, address)
        if namespace.is_not_found(removed):
            _click.echo(f"Not found: {address}", err=True)
        _emit_document(ctx, document, data, in_place)


@cli.command()
@_file_argument
@_address_argument
@_click.argument("value")
@_in_place_option
@_click.pass_context
def init(ctx: _click.Context, document: str, address: str, value: str, in_place: bool) -> None:
    """Store VALUE at ADDRESS only if nothing is stored there yet."""
    with _user_errors():
        data = _load(ctx, document)
        namespace.leaf_node(data, address, documents.parse_scalar(value))
        _emit_document(ctx, document, data, in_place)


@cli.command()
@_file_argument
@_click.pass_context
def flatten(ctx: _click.Context, document: str) -> None:
    """Print DOCUMENT as a flat mapping of dotted addresses to leaf values."""
    with _user_errors():
        flat = namespace.flatten(_load(ctx, document))
    _echo_value(ctx, flat)


@cli.command()
@_file_argument
@_click.pass_context
def expand(ctx: _click.Context, document: str) -> None:
    """Print a flat mapping of dotted addresses as a nested document."""
    with _user_errors():
        nested = namespace.expand(_load(ctx, document))
    _echo_value(ctx, nested)


@cli.command()
@_click.argument("parts", nargs=-1)
def join(parts: tuple[str, ...]) -> None:
    """Join PARTS into one dotted address."""
    _click.echo(namespace.join(*parts))


@cli.group(name="config", invoke_without_command=True)
@_click.pass_context
def config_cmd(ctx: _click.Context) -> None:
    """Configuration commands.

    Without a subcommand, shows the effective settings.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(config_show)


@config_cmd.command(name="show")
@_click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@_click.pass_context
def config_show(ctx: _click.Context, as_json: bool) -> None:
    """Show effective settings from all sources."""
    settings: config.Settings = ctx.obj["settings"]
    data = settings.model_dump(mode="json")
    if as_json:
        _click.echo(_json.dumps(data, indent=2))
    else:
        _echo_value(ctx, data)


@config_cmd.command(name="sources")
@_click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def config_sources(as_json: bool) -> None:
    """List the config files that were loaded, lowest precedence first."""
    with _user_errors():
        source = config.YamlLayersSettingsSource(config.Settings)
    layers = source.get_loaded_layers()
    if as_json:
        _click.echo(
            _json.dumps([{"layer": name, "path": str(path)} for name, path in layers], indent=2)
        )
        return
    if not layers:
        _click.echo("# no config files loaded")
    for name, path in layers:
        _click.echo(f"# [{name}] {path}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
