"""Interactive operator prompts built on click."""

from __future__ import annotations

from typing import List, Optional, Sequence, Set

import click

from .errors import OperatorCancelled
from .sync.models import RemoteFile
from .utils import console


def to_display_name(dir_name: str) -> str:
    """Convert a folder name like "web-research" to "Web Research"."""
    return " ".join(w[:1].upper() + w[1:] for w in dir_name.split("-"))


def choose_boilerplate(names: Sequence[str]) -> str:
    """Ask the operator to pick one boilerplate by number."""
    console.print("Select a boilerplate:", style="bold")
    for index, name in enumerate(names, start=1):
        console.print(f"  {index}. {to_display_name(name)} [dim]({name})[/dim]")
    try:
        choice = click.prompt(
            "Boilerplate",
            type=click.IntRange(1, len(names)),
            default=1,
        )
    except click.Abort as e:
        raise OperatorCancelled() from e
    return names[choice - 1]


def confirm_overwrites(
    changed: List[RemoteFile], preselected: Set[str]
) -> Optional[List[str]]:
    """Ask, file by file, which changed files to overwrite.

    Each question defaults to whether the file was pre-selected. Returns
    None when the operator aborts (Ctrl-C or end of input).
    """
    console.print("These files have changed locally:", style="bold yellow")
    selected: List[str] = []
    try:
        for remote_file in changed:
            if click.confirm(
                f"Overwrite {remote_file.relative_path}?",
                default=remote_file.relative_path in preselected,
            ):
                selected.append(remote_file.relative_path)
    except click.Abort:
        return None
    return selected
