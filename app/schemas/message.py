from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from .user import UserSummary

class SentMessage(BaseModel):
    """A message sent by a user, with the recipient's identity fields."""
    id: int
    to_user: UserSummary
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class ReceivedMessage(BaseModel):
    """A message received by a user, with the sender's identity fields."""
    id: int
    from_user: UserSummary
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None

    class Config:
        from_attributes = True
