"""Trello REST API client."""

import logging
from typing import Any
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ValidationError

from heyflow_trello.config import Settings
from heyflow_trello.errors import RemoteCallError, parse_trello_error
from .models import Board, BoardLabels, Label

logger = logging.getLogger(__name__)

_TIMEOUT = 30.0


class TrelloClient:
    """Authenticated access to the Trello API.

    Credentials come from the ``Settings`` handed in at construction; every
    request carries the same OAuth header. ``transport`` lets tests swap the
    network for an ``httpx.MockTransport``.
    """

    def __init__(self, config: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self._base_url = config.trello_api_url.rstrip("/") + "/"
        self._key = config.trello_key
        self._token = config.trello_token
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Authorization": f'OAuth oauth_consumer_key="{self._key}", oauth_token="{self._token}"',
        }

    def build_url(self, path: str, params: dict[str, str] | None = None) -> str:
        return f"{self._base_url}{path.lstrip('/')}?{urlencode(params or {})}"

    async def call(
        self, path: str, params: dict[str, str] | None = None, method: str = "GET"
    ) -> httpx.Response:
        """Send a request and return the raw response, whatever its status."""
        url = self.build_url(path, params)
        try:
            async with httpx.AsyncClient(timeout=_TIMEOUT, transport=self._transport) as client:
                resp = await client.request(method, url, headers=self._headers())
        except httpx.HTTPError as e:
            logger.error(f"Trello {method} {path} failed: {e!r}")
            raise RemoteCallError(f"Remote call to Trello failed: {method} {path}: {e}") from e
        logger.debug(f"Trello {method} {path} -> {resp.status_code}")
        return resp

    async def _call_json(
        self, model: type[BaseModel], path: str, params: dict[str, str] | None = None, method: str = "GET"
    ) -> Any:
        resp = await self.call(path, params, method)
        if not resp.is_success:
            raise RemoteCallError(
                f"Trello {method} {path} returned {resp.status_code}: {parse_trello_error(resp.text)}",
                status_code=resp.status_code,
            )
        try:
            return model.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise RemoteCallError(f"Unexpected Trello response for {method} {path}: {e}") from e

    # ------------------------------------------------------------------
    # Boards & labels
    # ------------------------------------------------------------------

    async def get_list_board(self, list_id: str) -> Board:
        return await self._call_json(Board, f"lists/{list_id}/board")

    async def get_board_labels(self, board_id: str) -> list[Label]:
        board = await self._call_json(
            BoardLabels, f"boards/{board_id}", {"labels": "all", "label_fields": "name,color"}
        )
        return board.labels

    async def create_label(self, board_id: str, name: str, color: str = "null") -> Label:
        """Create a label. Trello reads the string "null" as "no color"."""
        label = await self._call_json(
            Label, "labels", {"name": name, "color": color, "idBoard": board_id}, "POST"
        )
        logger.info(f"Created label '{name}' (id={label.id}) on board {board_id}")
        return label

    # ------------------------------------------------------------------
    # Cards
    # ------------------------------------------------------------------

    async def create_card(self, params: dict[str, str]) -> httpx.Response:
        """Create a card; the response is returned untouched for passthrough."""
        return await self.call("cards", params, "POST")
