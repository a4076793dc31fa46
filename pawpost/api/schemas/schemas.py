from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List
from datetime import datetime

# ids are INTEGER columns (32-bit on PostgreSQL)
MAX_ID = 2**31 - 1


class Credentials(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # passwords are taken verbatim, no stripping
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)

class RegisterRequest(Credentials):
    pass

class LoginRequest(Credentials):
    pass


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str

class AuthResponse(BaseModel):
    message: str
    user: UserResponse


class PostBase(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    user_id: int = Field(alias="userId", strict=True, ge=1, le=MAX_ID)

    # stored verbatim; whitespace-only still counts as missing
    @field_validator("title", "content")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

class PostCreate(PostBase):
    pass

class PostUpdate(PostBase):
    pass

class PostDelete(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    user_id: int = Field(alias="userId", strict=True, ge=1, le=MAX_ID)


class PostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    author_id: int
    created_at: datetime
    author: UserResponse

class PostEnvelope(BaseModel):
    post: PostResponse

class PostMessage(BaseModel):
    message: str
    post: PostResponse

class PostList(BaseModel):
    posts: List[PostResponse]

class Message(BaseModel):
    message: str


class DogFactResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    fact: str

class DogFactList(BaseModel):
    facts: List[DogFactResponse]
