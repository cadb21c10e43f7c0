from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .models.pruning import PruneReport
from .services.prune_service import load_request, prune_paths

app = typer.Typer(help="Reduce directory/file lists to a minimal covering set.")
console = Console()


def _ensure_src_on_path() -> None:
    """Allow running `python cli/main.py` without installation."""
    repo_root = Path(__file__).resolve().parents[2]
    src_dir = repo_root / "src"
    if src_dir.exists():
        sys.path.insert(0, str(src_dir))


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _print_report(report: PruneReport) -> None:
    """Render survivors and removed entries as a Rich listing."""

    console.print(f"[cyan]Directories[/cyan] ({len(report.directories)})")
    for path in report.directories:
        console.print(f"  {escape(path)}", soft_wrap=True)
    console.print(f"[cyan]Files[/cyan] ({len(report.files)})")
    for path in report.files:
        console.print(f"  {escape(path)}", soft_wrap=True)
    if report.removed_count:
        console.print(f"[yellow]Covered by a listed directory[/yellow] ({report.removed_count})")
        for path in [*report.removed_directories, *report.removed_files]:
            console.print(f"  [dim]{escape(path)}[/dim]", soft_wrap=True)


@app.callback()
def main_options(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    log_level: str = typer.Option(
        "WARNING", envvar="PATH_PRUNER_LOG_LEVEL", help="Logging level."
    ),
) -> None:
    """Configure logging before any command runs."""

    _configure_logging("DEBUG" if verbose else log_level)


@app.command()
def prune(
    directory: List[str] = typer.Option([], "--dir", help="Directory path (repeatable)."),
    file: List[str] = typer.Option([], "--file", help="File path (repeatable)."),
    pattern: List[str] = typer.Option([], "--pattern", help="Glob pattern under --root (repeatable)."),
    root: Path = typer.Option(Path("."), envvar="PATH_PRUNER_ROOT", help="Root directory for glob patterns."),
    request: Optional[Path] = typer.Option(None, help="JSON file with directories/files lists."),
    trim_root: Optional[str] = typer.Option(
        None, envvar="PATH_PRUNER_TRIM_ROOT", help="Root prefix stripped from printed paths."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
) -> None:
    """
    Drop every path already covered by a listed directory.

    All listed paths must exist; nothing is deleted.
    """

    directories = list(directory)
    files = list(file)
    try:
        if request is not None:
            req = load_request(request)
            directories.extend(req.directories)
            files.extend(req.files)
            trim_root = trim_root or req.trim_root
        if not directories and not files and not pattern:
            console.print("[yellow]No paths given; nothing to do.[/yellow]")
            raise typer.Exit(code=0)
        report = prune_paths(
            directories=directories,
            files=files,
            root=root,
            patterns=pattern,
            trim_root=trim_root,
        )
    except (OSError, ValueError) as exc:
        # ValidationError subclasses ValueError, as does malformed JSON.
        label = "Invalid request" if isinstance(exc, ValidationError) else "Error"
        console.print(f"[red]{label}:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if as_json:
        console.print_json(report.model_dump_json())
        return
    _print_report(report)


def main() -> None:
    _ensure_src_on_path()
    app()


if __name__ == "__main__":
    main()
