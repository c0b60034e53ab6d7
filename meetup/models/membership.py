from sqlalchemy import Column, ForeignKey, Integer

from meetup.database import Base


class UserJoinEvent(Base):
    """A user's membership in an event. The composite key rejects duplicate joins."""

    __tablename__ = "UsersJoinEvents"

    user_id = Column("UserID", Integer, primary_key=True, autoincrement=False)
    event_id = Column(
        "EventID", Integer, ForeignKey("Events.ID"), primary_key=True, autoincrement=False
    )
