from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

import requests

API = "https://api.github.com/repos/acme/kits/contents"


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, content: bytes = b"") -> None:
        self.status_code = status_code
        self.reason = "OK" if status_code < 300 else "Not Found"
        self._payload = payload
        self.content = content if payload is None else json.dumps(payload).encode()

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


def dir_entry(path: str) -> Dict[str, Any]:
    return {"name": path.rsplit("/", 1)[-1], "path": path, "type": "dir", "download_url": None}


def file_entry(path: str) -> Dict[str, Any]:
    return {
        "name": path.rsplit("/", 1)[-1],
        "path": path,
        "type": "file",
        "download_url": f"https://raw.example/{path}",
    }


class FakeGitHub:
    """Serves a tiny boilerplates tree in place of ``requests.get``."""

    def __init__(
        self,
        files: Dict[str, bytes],
        fail_on: Optional[str] = None,
        empty_dirs: Sequence[str] = (),
    ) -> None:
        self.files = files
        self.empty_dirs = list(empty_dirs)
        self.fail_on = fail_on
        self.calls: List[str] = []

    def listing(self, path: str) -> List[Dict[str, Any]]:
        prefix = f"{path}/"
        children: Dict[str, Dict[str, Any]] = {}
        for full in self.files:
            if not full.startswith(prefix):
                continue
            rest = full[len(prefix):]
            head = rest.split("/", 1)[0]
            child = f"{prefix}{head}"
            if "/" in rest:
                children.setdefault(child, dir_entry(child))
            else:
                children.setdefault(child, file_entry(child))
        for empty in self.empty_dirs:
            if empty.startswith(prefix) and "/" not in empty[len(prefix):]:
                children.setdefault(empty, dir_entry(empty))
        return list(children.values())

    def __call__(self, url: str, headers=None, params=None, timeout=None) -> FakeResponse:
        self.calls.append(url)
        if self.fail_on == "connection":
            raise requests.ConnectionError("network down")
        if self.fail_on and self.fail_on in url:
            return FakeResponse(status_code=404, payload={"message": "Not Found"})
        if url.startswith("https://raw.example/"):
            path = url[len("https://raw.example/"):]
            return FakeResponse(content=self.files[path])
        path = url[len(API) + 1:]
        return FakeResponse(payload=self.listing(path))
