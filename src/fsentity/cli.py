"""CLI commands using Typer."""

from __future__ import annotations

import os
from collections.abc import Callable
from datetime import datetime
from typing import Annotated, TypeVar

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from fsentity import __version__
from fsentity.directory import Directory
from fsentity.errors import FilesystemError
from fsentity.file import File

app = typer.Typer(
    name="fsentity",
    help="Inspect and manipulate files and directories",
    no_args_is_help=True,
)

console = Console()

T = TypeVar("T")


def show_success(message: str) -> None:
    """Show success message."""
    console.print(f"[green]✓[/green] {message}")


def show_error(message: str) -> None:
    """Show error message."""
    console.print(f"[red]✗[/red] {message}")


def _run(action: Callable[[], T]) -> T:
    """Run a library call, turning filesystem and settings errors into exit code 1."""
    try:
        return action()
    except FilesystemError as e:
        show_error(e.message)
        raise typer.Exit(1) from e
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        show_error(f"Invalid setting {field}: {first['msg']}")
        raise typer.Exit(1) from e
    except NotImplementedError as e:
        show_error(str(e))
        raise typer.Exit(1) from e


def _destination(dst: str) -> Directory | str:
    """Treat existing directories and paths ending with a separator as directories.

    The check runs on the resolved path, so relative destinations follow the
    configured base directory.
    """
    target = Directory(dst)
    if dst.endswith(("/", os.sep)) or target.fs.is_dir(target.path):
        return target
    return dst


def _format_time(timestamp: float) -> str:
    return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M:%S")


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"fsentity v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Inspect and manipulate files and directories."""
    pass


# ============================================================================
# Listing Commands
# ============================================================================


@app.command("ls")
def list_command(
    directory: Annotated[str, typer.Argument(help="Directory to list")] = ".",
    pattern: Annotated[str, typer.Option("--pattern", "-p", help="Glob pattern")] = "*",
) -> None:
    """List a directory."""
    target = _run(lambda: Directory(directory))
    entries = _run(lambda: target.list_directory(pattern))

    if not entries:
        console.print("[yellow]No entries found[/yellow]")
        return

    table = Table(title=target.path)
    table.add_column("Name", style="cyan")
    table.add_column("Kind")
    table.add_column("Size", justify="right")

    for entry in entries:
        if isinstance(entry, File):
            size = entry.size
            table.add_row(entry.name, "file", "" if size is None else str(size))
        else:
            table.add_row(entry.name + os.sep, "dir", "")

    console.print(table)


@app.command("find")
def find_command(
    directory: Annotated[str, typer.Argument(help="Directory to search")] = ".",
    pattern: Annotated[str, typer.Option("--pattern", "-p", help="Glob pattern")] = "*",
) -> None:
    """Search a directory recursively."""
    target = _run(lambda: Directory(directory))
    for entry in _run(lambda: target.find_recursive(pattern)):
        console.print(entry.path, highlight=False, soft_wrap=True)


# ============================================================================
# File Commands
# ============================================================================


@app.command("cat")
def cat_command(
    path: Annotated[str, typer.Argument(help="File to print")],
) -> None:
    """Print the content of a file."""
    file = _run(lambda: File(path))
    _run(file.assert_exists)
    content = _run(file.read)
    typer.echo(content.decode("utf-8", errors="replace"), nl=False)


@app.command("info")
def info_command(
    path: Annotated[str, typer.Argument(help="File to describe")],
) -> None:
    """Show metadata of a file."""
    file = _run(lambda: File(path))
    _run(file.assert_exists)
    meta = file.metadata

    table = Table(show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Path", file.path)
    table.add_row("Name", meta.base_name or "")
    table.add_row("Stem", meta.stem or "")
    table.add_row("Extension", meta.extension or "")
    table.add_row("Size", "" if meta.size is None else f"{meta.size} bytes")
    table.add_row("MIME type", meta.mime_type or "")
    table.add_row("MIME extension", meta.mime_extension or "")
    table.add_row("Modified", _format_time(_run(file.last_modified_time)))
    table.add_row("Accessed", _format_time(_run(file.last_accessed_time)))

    console.print(table)


@app.command("touch")
def touch_command(
    path: Annotated[str, typer.Argument(help="Path to create or stamp")],
    directory: Annotated[bool, typer.Option("--dir", "-d", help="Treat the path as a directory")] = False,
) -> None:
    """Create a file or directory, with missing parents."""
    entity = _run(lambda: (Directory(path) if directory else File(path)).touch())
    show_success(f"Touched {entity.path}")


@app.command("rm")
def remove_command(
    path: Annotated[str, typer.Argument(help="Path to delete")],
    directory: Annotated[bool, typer.Option("--dir", "-d", help="Delete a directory recursively")] = False,
) -> None:
    """Delete a file or a directory tree."""
    entity = _run(lambda: Directory(path) if directory else File(path))
    _run(entity.delete)
    show_success(f"Deleted {entity.path}")


@app.command("cp")
def copy_command(
    src: Annotated[str, typer.Argument(help="File to copy")],
    dst: Annotated[str, typer.Argument(help="Destination file or directory")],
    overwrite: Annotated[bool, typer.Option("--overwrite", "-f", help="Replace an existing destination")] = False,
) -> None:
    """Copy a file."""
    file = _run(lambda: File(src))
    source = file.path
    _run(lambda: file.copy_to(_destination(dst), overwrite=overwrite))
    show_success(f"Copied {source} to {file.path}")


@app.command("mv")
def move_command(
    src: Annotated[str, typer.Argument(help="File to move")],
    dst: Annotated[str, typer.Argument(help="Destination file or directory")],
) -> None:
    """Move a file."""
    file = _run(lambda: File(src))
    source = file.path
    _run(lambda: file.move_to(_destination(dst)))
    show_success(f"Moved {source} to {file.path}")


@app.command("clear")
def clear_command(
    directory: Annotated[str, typer.Argument(help="Directory to empty")],
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", "-e", help="Regular expression of names to keep (repeatable)"),
    ] = None,
) -> None:
    """Delete the content of a directory."""
    target = _run(lambda: Directory(directory))
    _run(lambda: target.clear(exclude or []))
    show_success(f"Cleared {target.path}")


if __name__ == "__main__":
    app()
