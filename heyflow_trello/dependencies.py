"""Shared FastAPI dependencies."""

from fastapi import Header, HTTPException, Query

from heyflow_trello.config import settings
from heyflow_trello.trello import TrelloClient


async def verify_api_key(
    x_api_key: str | None = Header(default=None),
    api_key: str | None = Query(default=None, alias="apiKey"),
) -> None:
    """Require the configured API key when one is set.

    Heyflow webhooks cannot always carry custom headers, so the key is also
    accepted as the ``apiKey`` query parameter.
    """
    if not settings.api_key:
        return
    if settings.api_key not in (x_api_key, api_key):
        raise HTTPException(401, "Invalid or missing API key")


def get_trello_client() -> TrelloClient:
    return TrelloClient(settings)
