"""Pydantic schema for read-only finance articles."""

from pydantic import BaseModel, Field


class ArticleRead(BaseModel):
    id: int = Field(..., examples=[1])
    title: str = Field(..., examples=["Tips Mengatur Keuangan Pribadi"])
    content: str = Field(..., examples=["Pelajari cara mengelola keuangan Anda dengan bijak."])
