# meetup/routes/events.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from meetup.database import get_db
from meetup.deps.security import get_current_user
from meetup.errors import EventServiceError
from meetup.models.channel import Channel
from meetup.models.event import Event
from meetup.models.membership import UserJoinEvent
from meetup.schemas import CallerUser, EventCreate, EventRead, JoinEvent
from meetup.utils import format_timestamp

logger = logging.getLogger("events")

router = APIRouter(prefix="/events", tags=["Events"])

SELECT_EVENTS_FAILED = "Cannot select events in database."
CREATE_EVENT_FAILED = "Cannot create new event or channel."
JOIN_EVENT_FAILED = "Cannot insert into UsersJoinEvents."
SELECT_JOINED_FAILED = "Cannot select joined events."

# Request bodies that cannot be parsed fail the same way as the insert would
BODY_FAILURES = {
    ("POST", "/events"): CREATE_EVENT_FAILED,
    ("POST", "/events/join"): JOIN_EVENT_FAILED,
}

# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------

async def _select_events(db: AsyncSession, stmt) -> List[EventRead]:
    events = (await db.execute(stmt)).scalars().all()
    return [EventRead.from_row(event) for event in events]


async def _rollback(db: AsyncSession) -> None:
    """Roll back, logging (not raising) if the rollback itself fails."""
    try:
        await db.rollback()
    except Exception:
        logger.error("Rollback failed", exc_info=True)

# List events --------------------------------------------------------

@router.get("", response_model=List[EventRead])
async def list_all_events(db: AsyncSession = Depends(get_db)):
    try:
        return await _select_events(db, select(Event))
    except Exception as exc:
        logger.error("Error selecting events", exc_info=True)
        raise EventServiceError.server_error(SELECT_EVENTS_FAILED, exc)

# Create event + channel ---------------------------------------------

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_event(
    event: EventCreate,
    db: AsyncSession = Depends(get_db),
    user: CallerUser = Depends(get_current_user),
):
    created_at = format_timestamp()
    try:
        # Channel first so the event can point at it; one transaction for both
        channel = Channel(
            name=event.title,
            description=event.description,
            private=False,
            time_created=created_at,
            creator=user.id,
            last_updated=created_at,
        )
        db.add(channel)
        await db.flush()  # populate channel.id

        db.add(
            Event(
                title=event.title,
                datetime=event.datetime,
                channel_id=channel.id,
                location=event.location,
                description=event.description,
            )
        )
        await db.commit()
    except Exception as exc:
        logger.error("Error creating event for user %s", user.id, exc_info=True)
        await _rollback(db)
        raise EventServiceError.server_error(CREATE_EVENT_FAILED, exc)

    logger.info("User %s created event %r on channel %s", user.id, event.title, channel.id)
    return Response(status_code=status.HTTP_201_CREATED)

# Join event ---------------------------------------------------------

@router.post("/join")
async def join_event(
    body: JoinEvent,
    db: AsyncSession = Depends(get_db),
    user: CallerUser = Depends(get_current_user),
):
    try:
        db.add(UserJoinEvent(user_id=user.id, event_id=body.id))
        await db.commit()
    except Exception as exc:
        logger.error("Error joining event %s for user %s", body.id, user.id, exc_info=True)
        await _rollback(db)
        raise EventServiceError.server_error(JOIN_EVENT_FAILED, exc)

    return Response(status_code=status.HTTP_200_OK)

# Joined events ------------------------------------------------------

@router.get("/joined", response_model=List[EventRead])
async def list_joined_events(
    db: AsyncSession = Depends(get_db),
    user: CallerUser = Depends(get_current_user),
):
    joined = select(UserJoinEvent.event_id).where(UserJoinEvent.user_id == user.id)
    try:
        return await _select_events(db, select(Event).where(Event.id.in_(joined)))
    except Exception as exc:
        logger.error("Error selecting joined events for user %s", user.id, exc_info=True)
        raise EventServiceError.server_error(SELECT_JOINED_FAILED, exc)
