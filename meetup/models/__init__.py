from meetup.models.channel import Channel
from meetup.models.event import Event
from meetup.models.membership import UserJoinEvent

__all__ = ["Channel", "Event", "UserJoinEvent"]
