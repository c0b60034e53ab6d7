from sqlalchemy import Boolean, Column, Integer, String, Text

from meetup.database import Base


class Channel(Base):
    __tablename__ = "Channels"

    id = Column("ID", Integer, primary_key=True, autoincrement=True)
    name = Column("ChannelName", String(255), nullable=False)
    description = Column("ChannelDescription", Text)
    private = Column("PrivateChannel", Boolean, nullable=False, default=False)
    # "YYYY-M-D H:M:S" strings, see meetup.utils.format_timestamp
    time_created = Column("TimeCreated", String(32))
    creator = Column("Creator", Integer)
    last_updated = Column("LastUpdated", String(32))

    def __repr__(self) -> str:
        return f"<Channel id={self.id} name={self.name!r} creator={self.creator}>"
