from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class CurrentStatus(BaseModel):
    status: Optional[Any] = None
    updated_at: Optional[Any] = Field(default=None, alias="updatedAt")

    class Config:
        extra = "ignore"
        populate_by_name = True


class DispatchStatusSnapshot(BaseModel):
    status: Optional[Any] = None
    current_status: Optional[CurrentStatus] = Field(
        default=None, alias="currentStatus"
    )
    updated_at: Optional[Any] = Field(default=None, alias="updatedAt")

    @field_validator("current_status", mode="before")
    @classmethod
    def drop_malformed_mirror(cls, v):
        # Anything other than a map is treated as a missing mirror
        if v is None or isinstance(v, (dict, CurrentStatus)):
            return v
        return None

    class Config:
        extra = "ignore"
        populate_by_name = True


class TrackNotificationClickRequest(BaseModel):
    notification_id: Optional[str] = Field(default=None, alias="notificationId")
    user_id: Optional[str] = Field(default=None, alias="userId")

    class Config:
        extra = "ignore"
        populate_by_name = True
