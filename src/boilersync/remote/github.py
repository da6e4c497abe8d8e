"""Boilerplate discovery and download through the GitHub contents API.

Lists the boilerplate directories of the configured repository, walks one
boilerplate recursively, and downloads every file's raw bytes into a
RemoteManifest. Any transport or API failure becomes SourceUnavailableError
so a run stops before the local directory is touched.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, TypedDict

import requests

from ..config import SourceConfig
from ..errors import SourceUnavailableError
from ..sync.models import RemoteFile, RemoteManifest

logger = logging.getLogger(__name__)

GITHUB_API_BASE = "https://api.github.com"
REQUEST_TIMEOUT = 30


class ContentEntry(TypedDict):
    name: str
    path: str
    type: str  # file | dir | symlink | submodule
    download_url: Optional[str]


@dataclass
class RemoteEntry:
    """A file found while walking a boilerplate, before download."""

    relative_path: str
    download_url: str


@dataclass
class GitHubAuth:
    token: Optional[str]

    @classmethod
    def from_env(cls) -> "GitHubAuth":
        return cls(token=os.getenv("GITHUB_TOKEN") or os.getenv("GITHUB_PAT"))


def _headers(auth: GitHubAuth) -> Dict[str, str]:
    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": "boilersync",
        "X-GitHub-Api-Version": "2022-11-28",
    }
    if auth.token:
        headers["Authorization"] = f"token {auth.token}"
    return headers


def _gh_get(
    url: str, auth: GitHubAuth, params: Optional[Dict[str, Any]] = None
) -> requests.Response:
    try:
        resp = requests.get(
            url, headers=_headers(auth), params=params, timeout=REQUEST_TIMEOUT
        )
    except requests.RequestException as e:
        raise SourceUnavailableError(f"Request to {url} failed: {e}") from e
    if resp.status_code >= 300:
        raise SourceUnavailableError(
            f"GitHub API error {resp.status_code} {resp.reason} for {url}"
        )
    return resp


def _list_contents(
    source: SourceConfig, api_path: str, auth: GitHubAuth
) -> List[ContentEntry]:
    url = f"{GITHUB_API_BASE}/repos/{source['owner']}/{source['repo']}/contents/{api_path}"
    params = {"ref": source["ref"]} if source.get("ref") else None
    resp = _gh_get(url, auth, params)
    try:
        data = resp.json()
    except ValueError as e:
        raise SourceUnavailableError(f"Malformed response for {api_path}: {e}") from e
    if not isinstance(data, list):
        raise SourceUnavailableError(f"Expected a directory listing for {api_path}")
    try:
        return [
            ContentEntry(
                name=str(item["name"]),
                path=str(item["path"]),
                type=str(item["type"]),
                download_url=item.get("download_url"),
            )
            for item in data
        ]
    except (KeyError, TypeError, AttributeError) as e:
        raise SourceUnavailableError(f"Malformed entry in listing for {api_path}: {e}") from e


def list_boilerplates(
    source: SourceConfig, auth: Optional[GitHubAuth] = None
) -> List[str]:
    """Return the names of the boilerplate directories in the source repo."""
    auth = auth or GitHubAuth.from_env()
    entries = _list_contents(source, source["path"], auth)
    return [e["name"] for e in entries if e["type"] == "dir"]


def list_boilerplate_files(
    source: SourceConfig, name: str, auth: Optional[GitHubAuth] = None
) -> List[RemoteEntry]:
    """Walk a boilerplate depth-first, in listing order."""
    auth = auth or GitHubAuth.from_env()
    files: List[RemoteEntry] = []

    def walk(api_path: str, prefix: str) -> None:
        for entry in _list_contents(source, api_path, auth):
            relative_path = f"{prefix}/{entry['name']}" if prefix else entry["name"]
            if entry["type"] == "file" and entry["download_url"]:
                files.append(RemoteEntry(relative_path, entry["download_url"]))
            elif entry["type"] == "dir":
                walk(entry["path"], relative_path)

    walk(f"{source['path']}/{name}" if source["path"] else name, "")
    return files


def download_file(url: str, auth: Optional[GitHubAuth] = None) -> bytes:
    """Download a file's raw content."""
    auth = auth or GitHubAuth.from_env()
    return _gh_get(url, auth).content


def fetch_manifest(
    source: SourceConfig,
    name: str,
    auth: Optional[GitHubAuth] = None,
    max_workers: Optional[int] = None,
) -> RemoteManifest:
    """Download every file of boilerplate ``name`` into an ordered manifest."""
    auth = auth or GitHubAuth.from_env()
    entries = list_boilerplate_files(source, name, auth)
    logger.info("Downloading %d files of %s", len(entries), name)

    def fetch(entry: RemoteEntry) -> RemoteFile:
        logger.debug("Downloading %s", entry.download_url)
        return RemoteFile(entry.relative_path, download_file(entry.download_url, auth))

    if max_workers and max_workers > 1 and len(entries) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            files = list(pool.map(fetch, entries))
    else:
        files = [fetch(e) for e in entries]

    try:
        return RemoteManifest(files)
    except ValueError as e:
        raise SourceUnavailableError(str(e)) from e
