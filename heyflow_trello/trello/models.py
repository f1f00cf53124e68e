"""Trello API objects the webhook needs to read."""

from pydantic import BaseModel, ConfigDict


class Board(BaseModel):
    """Board owning a list, as returned by ``lists/{id}/board``."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str | None = None


class Label(BaseModel):
    """Board label. Trello reports ``color`` as null for colorless labels."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str | None = None
    color: str | None = None

    def matches(self, value: str) -> bool:
        return self.name == value or self.color == value


class BoardLabels(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    labels: list[Label] = []
