# meetup/schemas.py
# ------------------------------------------------------------
# Pydantic v2 schemas
# ------------------------------------------------------------
from typing import Optional

from pydantic import BaseModel, ConfigDict


# ============================================================
# Caller identity
# ============================================================

class CallerUser(BaseModel):
    """The already-authenticated user forwarded in the X-User header."""

    model_config = ConfigDict(extra="allow")

    id: int


# ============================================================
# Events
# ============================================================

# Fields are left optional on purpose: anything missing reaches the
# database as NULL and is rejected (or not) there.
class EventCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    datetime: Optional[str] = None
    location: Optional[str] = None


class JoinEvent(BaseModel):
    id: Optional[int] = None


class EventRead(BaseModel):
    id: int
    title: Optional[str] = None
    datetime: Optional[str] = None
    channel: Optional[int] = None
    location: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_row(cls, event) -> "EventRead":
        return cls(
            id=event.id,
            title=event.title,
            datetime=event.datetime,
            channel=event.channel_id,
            location=event.location,
            description=event.description,
        )
