"""Shared error types and error-parsing utilities for the Trello integration."""

import json


class RemoteCallError(Exception):
    """A call to the Trello API failed or returned something unusable."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def parse_trello_error(response_text: str) -> str:
    """Extract a readable message from a Trello API error response.

    Trello answers most errors with plain text ("invalid id"), some with JSON
    like {"message": "...", "error": "ERROR"}. Returns "error: message" when
    parseable, raw text otherwise.
    """
    try:
        body = json.loads(response_text)
        if isinstance(body, dict):
            msg = body.get("message", "")
            err = body.get("error", "")
            if msg:
                return f"{err}: {msg}" if err else msg
    except ValueError:
        pass
    return response_text.strip()
