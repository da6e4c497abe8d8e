"""CLI interface for boilersync - fetch boilerplates and sync them locally."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Optional

import click
from rich.markup import escape

from .config import BoilerSyncConfig, get_config, load_config
from .errors import BoilerSyncError, ConfigError, OperatorCancelled
from .prompts import choose_boilerplate, confirm_overwrites, to_display_name
from .remote import fetch_manifest, list_boilerplates
from .sync import FileStatus, SyncMode, suffix_selector, summarize, synchronize
from .utils import console, err_console, setup_logging

STATUS_STYLES = {
    FileStatus.WRITTEN: ("✓", "green"),
    FileStatus.SKIPPED: ("⊘", "yellow"),
    FileStatus.UNCHANGED: ("=", "dim"),
}


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def _fail(message: str, detail: Optional[str] = None) -> NoReturn:
    err_console.print(escape(message), style="bold red")
    if detail:
        err_console.print(f"  {escape(detail)}", style="dim")
    sys.exit(1)


def _fetch_names(cfg: BoilerSyncConfig) -> list[str]:
    with console.status("[bold green]Fetching boilerplates..."):
        try:
            return list_boilerplates(cfg["source"])
        except BoilerSyncError as e:
            _fail(
                "Could not fetch boilerplates from GitHub.",
                f"{e}\nCheck your internet connection and try again.",
            )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a boilersync YAML config (default: discovered .boilersync.yml).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Optional[Path]) -> None:
    """Fetch boilerplate templates and sync them into a local directory."""
    setup_logging(verbose)
    try:
        ctx.obj = load_config(config_path) if config_path else get_config()
    except ConfigError as e:
        raise click.UsageError(str(e)) from e


@cli.command("list")
@click.pass_obj
def list_cmd(cfg: BoilerSyncConfig) -> None:
    """List available boilerplates."""
    names = _fetch_names(cfg)
    if not names:
        console.print("No boilerplates are available in the repository yet.")
        return
    for name in names:
        console.print(f"  {escape(name)}  [dim]{escape(to_display_name(name))}[/dim]")


@cli.command("sync")
@click.argument("name", required=False)
@click.option(
    "--dest",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to sync into (default: ./<name>).",
)
@click.option(
    "--interactive/--no-interactive",
    default=None,
    help="Ask which changed files to overwrite (default: only when NAME is omitted).",
)
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Parallel workers.")
@click.pass_obj
def sync_cmd(
    cfg: BoilerSyncConfig,
    name: Optional[str],
    dest: Optional[Path],
    interactive: Optional[bool],
    workers: Optional[int],
) -> None:
    """
    Copy boilerplate NAME into a local directory.

    New files are always written and identical files are left alone. Files
    that differ locally are offered for overwrite in interactive mode
    (PROMPT.md files pre-selected) and always skipped otherwise.
    """
    if interactive is None:
        interactive = name is None
    mode = SyncMode.INTERACTIVE if interactive else SyncMode.NON_INTERACTIVE
    max_workers = workers or cfg.get("workers")

    names = _fetch_names(cfg)
    if not names:
        console.print("No boilerplates are available in the repository yet.")
        return
    console.print(f"Found {_plural(len(names), 'boilerplate')}")

    try:
        if name is None:
            name = choose_boilerplate(names)
        elif name not in names:
            _fail(f'Boilerplate "{name}" not found.', f"Available: {', '.join(names)}")
        console.print(f"Using boilerplate: [bold]{escape(to_display_name(name))}[/bold]")

        with console.status("[bold green]Downloading files..."):
            try:
                manifest = fetch_manifest(cfg["source"], name, max_workers=max_workers)
            except BoilerSyncError as e:
                _fail("Could not fetch boilerplate files.", str(e))
        if not len(manifest):
            console.print("This boilerplate has no files.")
            return
        console.print(f"{_plural(len(manifest), 'file')} to copy")

        target = dest or Path(name)
        result = synchronize(
            manifest,
            target,
            mode,
            default_selector=suffix_selector(cfg["overwrite_by_default"]),
            prompt=confirm_overwrites,
            max_workers=max_workers,
        )
    except OperatorCancelled as e:
        console.print(str(e), style="yellow")
        sys.exit(0)
    except BoilerSyncError as e:
        _fail(str(e))

    if mode is SyncMode.NON_INTERACTIVE and result.classification.changed:
        console.print("Skipping changed files (non-interactive mode):", style="yellow")
        for f in result.classification.changed:
            console.print(f"  ⊘ {escape(str(target / f.relative_path))}", style="yellow")

    for line in result.lines:
        symbol, style = STATUS_STYLES[line.status]
        console.print(f"  {symbol} {escape(str(target / line.relative_path))}", style=style)

    counts = summarize(result.lines)
    console.print(
        f"\n{counts[FileStatus.WRITTEN]} written, "
        f"{counts[FileStatus.SKIPPED]} skipped, "
        f"{counts[FileStatus.UNCHANGED]} unchanged"
    )
    console.print(f"Done! Files are in [bold]{escape(str(target))}[/bold]/", style="green")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
