from sqlalchemy import Column, DateTime, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.models.base import Base

class User(Base):
    __tablename__ = "users"

    username = Column(Text, primary_key=True)
    password = Column(Text, nullable=False)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    join_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    last_login_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    messages_sent = relationship("Message", foreign_keys="Message.from_username", back_populates="from_user")
    messages_received = relationship("Message", foreign_keys="Message.to_username", back_populates="to_user")

    def __repr__(self):
        return f"<User(username='{self.username}')>"
