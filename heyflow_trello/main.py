"""Heyflow to Trello webhook - FastAPI application entry point."""

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from heyflow_trello import __version__
from heyflow_trello.config import settings
from heyflow_trello.dependencies import verify_api_key
from heyflow_trello.routers import health, webhooks

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Heyflow Trello Webhook",
    description="Creates Trello cards from Heyflow form submissions",
    version=__version__,
    debug=settings.debug,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    # methods the webhook route does not list get the same 405 body
    if exc.status_code == 405:
        return webhooks.method_not_allowed()
    return await http_exception_handler(request, exc)


# Rate limiting
app.state.limiter = webhooks.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers (health is public; the webhook catch-all goes last so it does not
# shadow /health)
app.include_router(health.router)
app.include_router(webhooks.router, tags=["webhooks"], dependencies=[Depends(verify_api_key)])
