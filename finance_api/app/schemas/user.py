"""
Pydantic models for user data.

Users are seeded at startup and never created through the API, so there
is only a read schema.  It documents the stored record as-is,
including the password field, which this service returns unmasked.
"""

from typing import List

from pydantic import BaseModel, Field

from .transaction import TransactionRead


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Heru"])
    email: str = Field(..., examples=["123@gmail.com"])
    password: str = Field(..., examples=["pass"])
    gender: str = Field(..., examples=["Laki-laki"])
    phone: str = Field(..., examples=["089123456789"])
    transactions: List[TransactionRead] = Field(default_factory=list)
