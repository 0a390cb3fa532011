"""Pydantic schemas for the notifier's HTTP surface."""

from pydantic import BaseModel, Field


class FileTicketRequest(BaseModel):
    task: str
    tests: list[str] = Field(default_factory=list)


class FileTicketResponse(BaseModel):
    key: str
    ticket_id: str | None = None


class DispatchEventRequest(BaseModel):
    id: str | None = None
    resource_type: str
    resource_id: str
    event_type: str
    data: dict = Field(default_factory=dict)


class DispatchEventResponse(BaseModel):
    event_id: str
    status: str
    notification_ids: list[str] = Field(default_factory=list)
    error: str | None = None
