import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictBool


# --- Authentication ---
# Required fields are declared optional so that presence checks happen in the
# auth service and report ValidationError with a readable message.
class UserRegister(BaseModel):
    # Numeric JSON values (e.g. a mobile number sent as 555) are kept as text
    model_config = ConfigDict(coerce_numbers_to_str=True)

    username: str | None = Field(
        None, max_length=50, description="Username for the new account"
    )
    password: str | None = Field(
        None, max_length=72, description="Password for the new account (bcrypt limit)"
    )
    email: str | None = Field(
        None, max_length=255, description="Email address, unique per account"
    )
    mobile: str | None = Field(None, max_length=32, description="Mobile number")


class UserLogin(BaseModel):
    username: str | None = Field(None, description="Username for login")
    password: str | None = Field(None, description="Password for login")


class AuthResponse(BaseModel):
    id: uuid.UUID = Field(..., description="User unique identifier")
    username: str = Field(..., description="Username")
    token: str = Field(..., description="JWT bearer token, valid for 24 hours")


class UserInfo(BaseModel):
    id: uuid.UUID = Field(..., description="User unique identifier")
    username: str = Field(..., description="Username")
    email: str = Field(..., description="Email address")
    mobile: str = Field(..., description="Mobile number")
    created_at: datetime = Field(..., description="Account creation timestamp")

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str = Field(..., description="Response message")


# --- Tasks ---
class TaskCreate(BaseModel):
    title: str | None = Field(None, max_length=200, description="Task title")
    description: str | None = Field(None, description="Optional task details")


class TaskUpdate(BaseModel):
    # Only the fields present in the request body are applied
    title: str | None = Field(None, max_length=200, description="New title")
    description: str | None = Field(None, description="New description")
    completed: StrictBool | None = Field(None, description="New completion state")


class TaskResponse(BaseModel):
    id: uuid.UUID
    title: str
    description: str | None = None
    completed: bool
    owner_id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class HealthResponse(BaseModel):
    status: str = Field(..., description="'ok' when the database is reachable")
