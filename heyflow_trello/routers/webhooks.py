"""Heyflow webhook endpoint - turns form submissions into Trello cards."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from heyflow_trello.config import settings
from heyflow_trello.dependencies import get_trello_client
from heyflow_trello.normalizer import normalize_params
from heyflow_trello.submission import HeyflowPayload, Submission
from heyflow_trello.trello import TrelloClient

logger = logging.getLogger(__name__)
router = APIRouter()

limiter = Limiter(key_func=get_remote_address)

POST_ONLY = "Only 'POST' requests are allowed"

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def method_not_allowed() -> JSONResponse:
    return _error(405, POST_ONLY)


async def _read_body(request: Request):
    try:
        return await request.json()
    except ValueError:
        logger.warning("Webhook body is not valid JSON, treating it as empty")
        return {}


def _list_id(request: Request) -> str | None:
    # a repeated listId is ambiguous, treat it like a missing one
    values = request.query_params.getlist("listId")
    return values[0] if len(values) == 1 else None


async def create_card(submission: Submission, list_id: str, client: TrelloClient) -> Response:
    """Create the card and mirror Trello's answer back to the caller."""
    try:
        params = await normalize_params(submission.props, list_id, client)
        resp = await client.create_card(params)
        # Trello errors are passed through with their own status
        content = resp.json() if resp.is_success else resp.text
    except Exception as e:
        logger.error(f"Card creation for list {list_id} failed: {e}")
        return _error(500, str(e))

    if resp.is_success:
        logger.info(f"Created card '{submission.props['name']}' in list {list_id}")
    else:
        logger.warning(f"Trello rejected card for list {list_id}: {resp.status_code} {resp.text}")
    return JSONResponse(status_code=resp.status_code, content=content)


@router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
@limiter.limit(settings.webhook_rate_limit)
async def heyflow_webhook(
    request: Request,
    path: str,
    client: TrelloClient = Depends(get_trello_client),
):
    """Receive a Heyflow submission; ``?listId=`` names the target Trello list."""
    body = await _read_body(request) if request.method == "POST" else None
    logger.info(f"{request.method} /{path} body={body!r} query={dict(request.query_params)}")

    if request.method != "POST":
        return method_not_allowed()

    payload = HeyflowPayload.from_body(body)
    submission = Submission.parse(payload)
    list_id = _list_id(request)

    if submission.is_valid and list_id is not None:
        return await create_card(submission, list_id, client)

    # Heyflow expects a 2xx when it initializes the webhook
    if payload.is_handshake:
        return Response(status_code=201)

    return _error(
        400,
        "The search param listId is not given" if submission.is_valid else "Request body is missing name",
    )
