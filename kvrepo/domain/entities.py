"""
Domain records stored by the repositories.

Each record type designates one string field as its natural key. Field
validation happens here, at construction time; the repositories store
whatever they are given.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class Account(BaseModel):
    """User account, keyed by ``name``."""

    name: str = Field(min_length=1, description="Unique account name")
    email: Optional[str] = Field(None, description="Contact email address")
    display_name: Optional[str] = Field(None, description="Human readable name")
    active: bool = Field(True, description="Whether the account is enabled")


class Todo(BaseModel):
    """Todo item, keyed by ``id``."""

    id: str = Field(min_length=1, description="Unique todo identifier")
    title: str = Field("", description="Short summary")
    description: Optional[str] = Field(None, description="Longer free-form text")
    completed: bool = Field(False, description="Completion state")
    owner: Optional[str] = Field(None, description="Name of the owning account")
    tags: List[str] = Field(default_factory=list, description="Free-form labels")
