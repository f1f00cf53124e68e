"""Field-name normalization from Heyflow form labels to Trello card parameters.

``KEY_REPLACERS`` is the only place field-specific behavior lives: a form
field whose (lowercased) label has an entry here is rewritten by its transform
before the card is created. Everything else is sent to Trello unchanged.
"""

import logging
from typing import Awaitable, Callable

from heyflow_trello.trello import TrelloClient

logger = logging.getLogger(__name__)

FieldTransform = Callable[[str, str, TrelloClient], Awaitable[tuple[str, str]]]


async def _description(value: str, list_id: str, client: TrelloClient) -> tuple[str, str]:
    return "desc", value


async def _label(value: str, list_id: str, client: TrelloClient) -> tuple[str, str]:
    """Resolve a label by name (or color) on the list's board, creating it if absent."""
    board = await client.get_list_board(list_id)
    labels = await client.get_board_labels(board.id)

    match = next((label for label in labels if label.matches(value)), None)
    if match:
        logger.info(f"Using existing label {match.id} for '{value}' on board {board.id}")
        return "idLabels", match.id

    created = await client.create_label(board.id, value)
    return "idLabels", created.id


KEY_REPLACERS: dict[str, FieldTransform] = {
    "description": _description,
    "label": _label,
}


async def normalize_params(
    props: dict[str, str],
    list_id: str,
    client: TrelloClient,
    replacers: dict[str, FieldTransform] | None = None,
) -> dict[str, str]:
    """Build the create-card parameters for a submission.

    Transforms run one after another in the submission's key order. A
    replaced key is dropped and its new pair appended at the end. Each
    parameter carries one value, so a form field already named like the
    new key is overwritten.
    """
    replacers = KEY_REPLACERS if replacers is None else replacers
    params = {**props, "idList": list_id}
    for key in props:
        transform = replacers.get(key)
        if transform is None:
            continue
        new_key, new_value = await transform(params[key], list_id, client)
        del params[key]
        if new_key in params:
            logger.warning(f"Field '{key}' overwrites '{new_key}' already set by the form")
        params[new_key] = new_value
    return params
