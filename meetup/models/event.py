from sqlalchemy import Column, ForeignKey, Integer, String, Text

from meetup.database import Base


class Event(Base):
    __tablename__ = "Events"

    id = Column("ID", Integer, primary_key=True, autoincrement=True)
    title = Column("Title", String(255), nullable=False)
    # Stored as text exactly as the client sent it
    datetime = Column("EventDateTime", String(32))
    channel_id = Column("ChannelID", Integer, ForeignKey("Channels.ID"))
    location = Column("LocationOfEvent", String(255))
    description = Column("DescriptionOfEvent", Text)

    def __repr__(self) -> str:
        return f"<Event id={self.id} title={self.title!r} channel={self.channel_id}>"
