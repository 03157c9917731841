"""Whitelist document data model."""

from pydantic import BaseModel, ConfigDict, Field


class WhitelistDocument(BaseModel):
    """
    JSON whitelist contract.

    Each entry is one member selector string, for example
    ``com.example.Account.getBalance()``.
    """

    model_config = ConfigDict(extra="forbid")
    description: str | None = Field(default=None, max_length=500)
    entries: list[str] = Field(default_factory=list)
