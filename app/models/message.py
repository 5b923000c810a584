from sqlalchemy.orm import relationship
from sqlalchemy import Column, ForeignKey, Text, DateTime, Integer
from sqlalchemy.sql import func

from .base import Base

class Message(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Sender information
    from_username = Column(Text, ForeignKey("users.username"), nullable=False, index=True)
    from_user = relationship("User", foreign_keys=[from_username], back_populates="messages_sent")

    # Recipient information
    to_username = Column(Text, ForeignKey("users.username"), nullable=False, index=True)
    to_user = relationship("User", foreign_keys=[to_username], back_populates="messages_received")

    body = Column(Text, nullable=False)

    # Timestamps
    sent_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    read_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<Message(id={self.id}, from_username='{self.from_username}', body='{self.body[:50]}...')>"
