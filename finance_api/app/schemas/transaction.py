"""
Pydantic models for transaction data.

``TransactionRead`` describes a stored transaction for the API
documentation.  The request bodies (``TransactionCreate`` and
``TransactionUpdate``) are deliberately permissive: every field is
optional, values are not coerced, and unknown keys are kept.  Whatever
the client sends is merged into the stored record verbatim, so the
field types only serve as documentation.
"""

from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field

TransactionType = Literal["income", "expense"]


class TransactionBase(BaseModel):
    type: TransactionType = Field(..., examples=["income"])
    amount: float = Field(..., examples=[500000])
    description: str = Field(..., examples=["Gaji"])


class TransactionRead(TransactionBase):
    """Schema for a transaction as returned by the API."""

    id: int = Field(..., examples=[1])


class TransactionPatch(BaseModel):
    """Partial transaction: only the keys present in the request are applied."""

    model_config = ConfigDict(extra="allow")

    type: Any = Field(
        None,
        json_schema_extra={"type": "string", "enum": ["income", "expense"]},
        examples=["income"],
    )
    amount: Any = Field(None, json_schema_extra={"type": "number"}, examples=[1000])
    description: Any = Field(None, json_schema_extra={"type": "string"}, examples=["Test"])

    def changes(self) -> Dict[str, Any]:
        """Return the fields the client actually sent, extra keys included."""
        return self.model_dump(exclude_unset=True)


class TransactionCreate(TransactionPatch):
    """Body of ``POST /users/{id}/transactions``.

    The server assigns ``id``; a client-supplied ``id`` takes precedence.
    """


class TransactionUpdate(TransactionPatch):
    """Body of ``PUT /users/{userId}/transactions/{transactionId}``."""
