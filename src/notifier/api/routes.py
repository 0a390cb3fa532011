"""FastAPI routes for the notifier.

Thin adapters that translate HTTP requests into notifier calls and map the
error taxonomy onto status codes.
"""

import structlog
from fastapi import APIRouter, Header, HTTPException, Request
from notifier.api.schemas import (
    DispatchEventRequest,
    DispatchEventResponse,
    FileTicketRequest,
    FileTicketResponse,
)
from notifier.buildbaron.tickets import file_ticket
from notifier.errors import (
    HostNotFound,
    LookupFailed,
    TaskNotFound,
    TemplateError,
    UpstreamServiceError,
)
from notifier.event.event_log import EventLogEntry
from notifier.trigger.dispatch import process_event
from notifier.utils.logging import bind_event_context, clear_event_context
from pydantic import ValidationError as PydanticValidationError

logger = structlog.get_logger(__name__)

buildbaron_router = APIRouter(prefix="/plugin/buildbaron", tags=["buildbaron"])
events_router = APIRouter(prefix="/events", tags=["events"])


# ---------------------------------------------------------------------------
# Build baron
# ---------------------------------------------------------------------------
@buildbaron_router.post("/file_ticket", response_model=FileTicketResponse)
async def file_build_failure_ticket(
    request: Request,
    api_user: str | None = Header(default=None, alias="Api-User"),
) -> FileTicketResponse:
    """File a JIRA build-failure ticket for a task's selected failing tests."""
    if not api_user:
        raise HTTPException(status_code=401, detail="must be logged in to file a ticket")

    try:
        body = FileTicketRequest.model_validate(await request.json())
    except (ValueError, PydanticValidationError) as e:
        raise HTTPException(status_code=500, detail=f"could not decode request: {e}") from e

    try:
        result = file_ticket(body.task, body.tests, api_user)
    except TaskNotFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except (HostNotFound, LookupFailed) as e:
        raise HTTPException(status_code=500, detail=str(e)) from e
    except TemplateError as e:
        raise HTTPException(status_code=400, detail=f"error creating description: {e}") from e
    except UpstreamServiceError as e:
        raise HTTPException(status_code=400, detail=f"error creating JIRA ticket: {e}") from e

    return FileTicketResponse(key=result.key, ticket_id=result.ticket_id)


# ---------------------------------------------------------------------------
# Event intake
# ---------------------------------------------------------------------------
@events_router.post("/dispatch", response_model=DispatchEventResponse)
async def dispatch_event(body: DispatchEventRequest) -> DispatchEventResponse:
    """Dispatch a logged event synchronously and report what it produced."""
    event = EventLogEntry.log(
        resource_type=body.resource_type,
        resource_id=body.resource_id,
        event_type=body.event_type,
        data=body.data,
        event_id=body.id,
    )

    bind_event_context(event_id=event.id, resource_type=event.resource_type, resource_id=event.resource_id)
    try:
        outcome = process_event(event)
    finally:
        clear_event_context()

    return DispatchEventResponse(
        event_id=outcome.event_id,
        status=outcome.status,
        notification_ids=[str(n.id) for n in outcome.notifications],
        error=outcome.error,
    )
