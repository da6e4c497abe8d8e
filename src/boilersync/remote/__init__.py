"""Remote boilerplate sources."""

from .github import (
    GitHubAuth,
    RemoteEntry,
    download_file,
    fetch_manifest,
    list_boilerplate_files,
    list_boilerplates,
)

__all__ = [
    "GitHubAuth",
    "RemoteEntry",
    "download_file",
    "fetch_manifest",
    "list_boilerplate_files",
    "list_boilerplates",
]
