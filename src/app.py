"""Notifier FastAPI application.

Serves the build-baron ticket filer and a synchronous event intake. Each
request runs inside the notifier domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the domain config overlay ("test", "production", ...).
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from notifier.domain import notifier  # noqa: E402
from notifier.utils.logging import configure_logging

configure_logging()
notifier.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="CI Notifier API",
    description="Event triggers, notification dispatch, and build-baron ticket filing",
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the notifier domain context for each request."""
    with notifier.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from notifier.api.routes import buildbaron_router, events_router  # noqa: E402

app.include_router(buildbaron_router)
app.include_router(events_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": notifier.name})
