"""fshandle CLI entrypoint.

Command-line interface over the Workspace operations.
"""

from __future__ import annotations

import functools
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from fshandle.core.workspace import Workspace

from fshandle.core.errors import FsHandleCliError, to_cli_error
from fshandle.domain.entities import DirectoryHandle, FileHandle
from fshandle.version import __version__

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def handle_cli_errors(command_name: str):
    """Decorator to handle common CLI errors.

    FsHandleCliError is re-raised untouched. Anything else is converted to
    FsHandleCliError, with a traceback printed first in verbose mode.

    Args:
        command_name: Name of the command for error messages.

    Returns:
        Decorated function with error handling.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (FsHandleCliError, click.exceptions.Exit):
                raise
            except Exception as e:
                ctx = click.get_current_context()
                if ctx.obj.get("verbose", False):
                    import traceback

                    traceback.print_exc()
                raise to_cli_error(e, command_name) from e

        return wrapper

    return decorator


def _workspace(ctx: click.Context) -> Workspace:
    """Create the Workspace for this invocation (once per context)."""
    if "workspace" not in ctx.obj:
        from fshandle.adapters.factory import WorkspaceFactory

        ctx.obj["workspace"] = WorkspaceFactory().create_workspace()
    return ctx.obj["workspace"]


def _entry(ws: Workspace, path: str) -> FileHandle | DirectoryHandle:
    if ws.fs.is_dir(path):
        return DirectoryHandle(path)
    return FileHandle(path)


def _echo(ctx: click.Context, message: str) -> None:
    if not ctx.obj.get("quiet", False):
        click.echo(message)


@click.group()
@click.version_option(version=__version__, prog_name="fshandle")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress non-essential output.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """fshandle - relative paths, glob search and tree copy for directories."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


@cli.command()
@click.argument("base")
@click.argument("target")
@click.pass_context
@handle_cli_errors("relative")
def relative(ctx: click.Context, base: str, target: str) -> None:
    """Print TARGET's path relative to the directory BASE.

    Exits with status 1 when the two paths share no common ancestor.
    """
    result = _workspace(ctx).relative(DirectoryHandle(base), target)
    if result is None:
        click.echo(f"'{target}' is not related to '{base}'", err=True)
        ctx.exit(1)
    click.echo(result)


@cli.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False))
@click.argument("glob")
@click.option(
    "--case-sensitive/--ignore-case",
    default=None,
    help="Override the configured case sensitivity.",
)
@click.pass_context
@handle_cli_errors("search")
def search(ctx: click.Context, root: str, glob: str, case_sensitive: bool | None) -> None:
    """List files below ROOT whose relative path matches GLOB.

    "*" stays within one directory; "**" crosses directories.
    """
    ws = _workspace(ctx)
    root_dir = DirectoryHandle(root)
    for file in ws.search(root_dir, glob, case_sensitive):
        click.echo(ws.relative(root_dir, file))


@cli.command(name="ls")
@click.argument("directory", type=click.Path(exists=True, file_okay=False), default=".")
@click.option("--dirs", "-d", "only_dirs", is_flag=True, help="List directories only.")
@click.option("--recursive", "-r", is_flag=True, help="Descend into subdirectories.")
@click.pass_context
@handle_cli_errors("ls")
def ls_command(ctx: click.Context, directory: str, only_dirs: bool, recursive: bool) -> None:
    """List the contents of DIRECTORY."""
    ws = _workspace(ctx)
    root = DirectoryHandle(directory)
    if only_dirs:
        entries = ws.directories(root) if recursive else ws.subdirectories(root)
    elif recursive:
        entries = ws.files(root)
    else:
        entries = ws.subdirectories(root) + [
            f for f in ws.files(root) if ws.fs.sep not in ws.relative(root, f)
        ]
    for entry in entries:
        click.echo(ws.relative(root, entry))


@cli.command()
@click.argument("source", type=click.Path(exists=True))
@click.argument("destination", nargs=-1, required=True)
@click.pass_context
@handle_cli_errors("copy")
def copy(ctx: click.Context, source: str, destination: tuple[str, ...]) -> None:
    """Copy SOURCE to DESTINATION.

    If DESTINATION is an existing directory SOURCE is copied into it,
    otherwise it is copied to exactly DESTINATION. Multiple DESTINATION
    parts are joined into one path.
    """
    ws = _workspace(ctx)
    entry = _entry(ws, source)
    target = ws.replicator.resolve_destination(entry, *destination)
    ws.copy(entry, *destination)
    _echo(ctx, f"Copied {source} -> {target}")


@cli.command()
@click.argument("source", type=click.Path(exists=True))
@click.argument("destination", nargs=-1, required=True)
@click.pass_context
@handle_cli_errors("move")
def move(ctx: click.Context, source: str, destination: tuple[str, ...]) -> None:
    """Move SOURCE to DESTINATION (same placement rules as copy)."""
    ws = _workspace(ctx)
    entry = ws.move(_entry(ws, source), *destination)
    _echo(ctx, f"Moved {source} -> {entry.path}")


# Configuration management commands
@cli.group()
def config() -> None:
    """Manage fshandle configuration files.

    fshandle uses a two-tier configuration system:
    - Local: .fshandle/config.toml (in the working directory)
    - Global: ~/.config/fshandle/config.toml (user defaults)

    Local settings override global settings. Missing values use built-in defaults.
    """
    pass


def _display_path_status(path: Path, label: str) -> None:
    """Display a config path with its existence status."""
    status = "exists" if path.exists() else "not created"
    color = "green" if path.exists() else "yellow"
    click.echo(f"{label}{path}")
    click.echo(f"  Status: {click.style(status, fg=color)}")


@config.command(name="show")
@click.pass_context
@handle_cli_errors("config show")
def config_show(ctx: click.Context) -> None:
    """Show configuration file locations and effective settings."""
    from fshandle.shared.config_io import get_global_config_path, get_local_config_dir

    _display_path_status(get_global_config_path(), "Global config: ")
    _display_path_status(get_local_config_dir() / "config.toml", "Local config:  ")

    settings = _workspace(ctx).config
    click.echo("\nEffective configuration:")
    click.echo("  [search]")
    click.echo(f"    case_sensitive = {str(settings.search.case_sensitive).lower()}")
    click.echo("  [paths]")
    click.echo(f"    segment_matching = {str(settings.paths.segment_matching).lower()}")


@config.command(name="init")
@click.option(
    "--global", "-g", "init_global", is_flag=True, help="Write the global config instead"
)
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config file")
@click.pass_context
@handle_cli_errors("config init")
def config_init(ctx: click.Context, init_global: bool, force: bool) -> None:
    """Write a config file holding the default settings."""
    from fshandle.domain.config import FsHandleConfig
    from fshandle.shared.config_io import (
        get_global_config_path,
        get_local_config_dir,
        save_config,
    )

    path = get_global_config_path() if init_global else get_local_config_dir() / "config.toml"
    if path.exists() and not force:
        raise FsHandleCliError(
            f"Config file already exists: {path}",
            hint="Use --force to overwrite it",
        )
    save_config(FsHandleConfig.default(), path)
    _echo(ctx, f"Wrote {path}")


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
