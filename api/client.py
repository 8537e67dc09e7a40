"""
Client for the snippet API.

Used by whatever owns the REPL connection: it asks the service for the text to
send and does the sending itself.
"""

import os
from typing import Optional

import requests

# Service URL (container DNS / service name). With docker-compose this resolves to the api service.
SNIPPET_SERVICE_URL = os.environ.get("SNIPPET_SERVICE_URL", "http://repl-snippets:8081")
REQUEST_TIMEOUT = int(os.environ.get("SNIPPET_REQUEST_TIMEOUT", "10"))


class SnippetServiceError(Exception):
    """The service answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _check(resp: requests.Response) -> dict:
    if resp.ok:
        return resp.json()
    try:
        message = resp.json().get("error", resp.text)
    except ValueError:
        message = resp.text
    raise SnippetServiceError(resp.status_code, message)


def fetch_bootstrap(lang: Optional[str] = None, base_url: str = SNIPPET_SERVICE_URL) -> str:
    params = {"lang": lang} if lang is not None else None
    resp = requests.get(f"{base_url}/bootstrap", params=params, timeout=REQUEST_TIMEOUT)
    return _check(resp)["code"]


def fetch_eval(code: str, ns: str, lang: str, base_url: str = SNIPPET_SERVICE_URL) -> str:
    """
    Ask the service to wrap `code` for namespace `ns` and return the snippet.
    """
    payload = {"code": code, "ns": ns, "lang": lang}
    resp = requests.post(f"{base_url}/eval", json=payload, timeout=REQUEST_TIMEOUT)
    return _check(resp)["code"]
