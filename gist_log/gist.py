"""
Thin client for the GitHub Gist API.

Only two calls are needed: read one file of a gist and write it back.
Errors from ``requests`` are left to propagate to the caller.
"""
import logging

import requests

from .config import GistLogConfig


class GistStore:
    def __init__(self, config: GistLogConfig, session=None):
        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {config.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        })

    @property
    def url(self) -> str:
        return f"{self.config.api_url}/gists/{self.config.gist_id}"

    def fetch(self, name: str) -> str:
        """Return the content of ``name`` in the gist, or "" if it is missing."""
        logging.info(f"GET {self.url} ({name})")
        resp = self.session.get(self.url, timeout=self.config.timeout)
        resp.raise_for_status()
        file_info = (resp.json().get("files") or {}).get(name)
        if not file_info:
            logging.info(f"{name} not found in gist {self.config.gist_id}")
            return ""
        if file_info.get("truncated") and file_info.get("raw_url"):
            logging.info(f"{name} is truncated, downloading {file_info['raw_url']}")
            raw = self.session.get(file_info["raw_url"], timeout=self.config.timeout)
            raw.raise_for_status()
            return raw.text
        return file_info.get("content") or ""

    def save(self, name: str, text: str) -> None:
        logging.info(f"PATCH {self.url} ({name}, {len(text)} chars)")
        resp = self.session.patch(
            self.url,
            json={"files": {name: {"content": text}}},
            timeout=self.config.timeout,
        )
        resp.raise_for_status()
