from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field


class ContactRequest(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    message: str = Field(min_length=1)


class ContactMessage(BaseModel):
    id: int
    name: str | None = None
    email: str | None = None
    message: str | None = None
    isRead: bool = Field(default=False, validation_alias=AliasChoices("isRead", "read"))
    sentAt: datetime | None = None
