from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from heyflow_trello import __version__
from heyflow_trello.config import settings


router = APIRouter(tags=["health"])

_startup_time = datetime.now(timezone.utc)


class EndpointInfo(BaseModel):
    path: str
    description: str
    provider: str | None = None


class HealthResponse(BaseModel):
    status: str
    version: str
    uptime_seconds: float
    endpoints: list[EndpointInfo]


class IntegrationStatus(BaseModel):
    connected: bool
    status: str
    last_check: str | None = None


class IntegrationsResponse(BaseModel):
    trello: IntegrationStatus


ENDPOINTS = [
    EndpointInfo(path="/health", description="Service status and API directory"),
    EndpointInfo(path="/health/integrations", description="Integration connection status"),
    EndpointInfo(path="/?listId=<id>", description="Heyflow webhook, creates a card", provider="Trello"),
]


def _check_trello() -> IntegrationStatus:
    if not settings.trello_key or not settings.trello_token:
        return IntegrationStatus(connected=False, status="credentials not configured")
    return IntegrationStatus(
        connected=True,
        status="ok",
        last_check=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    uptime = (datetime.now(timezone.utc) - _startup_time).total_seconds()

    return HealthResponse(
        status="ok",
        version=__version__,
        uptime_seconds=round(uptime, 2),
        endpoints=ENDPOINTS,
    )


@router.get("/health/integrations", response_model=IntegrationsResponse)
async def get_integrations():
    return IntegrationsResponse(trello=_check_trello())
