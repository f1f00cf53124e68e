"""
Trello Client

Outbound adapter for the Trello REST API.
"""

from .client import TrelloClient
from .models import Board, Label

__all__ = ["TrelloClient", "Board", "Label"]
