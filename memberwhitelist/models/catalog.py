"""Type catalog data models for the catalog resolver."""

from pydantic import BaseModel, ConfigDict, Field


class MethodSpec(BaseModel):
    """A public method; only name and parameter types identify it."""

    model_config = ConfigDict(extra="forbid")
    name: str
    params: list[str] = Field(default_factory=list)
    returns: str | None = None  # informational, never matched


class MarkerSpec(BaseModel):
    """A member carrying the inheritable override marker."""

    model_config = ConfigDict(extra="forbid")
    kind: str = Field(..., pattern=r"^(method|constructor|field)$")
    name: str | None = None
    params: list[str] = Field(default_factory=list)


class TypeSpec(BaseModel):
    """One host type: its direct supertypes and its declared public members."""

    model_config = ConfigDict(extra="forbid")
    name: str
    superclass: str | None = None
    interfaces: list[str] = Field(default_factory=list)
    is_interface: bool = False
    fields: list[str] = Field(default_factory=list)
    methods: list[MethodSpec] = Field(default_factory=list)
    constructors: list[list[str]] = Field(default_factory=list)
    marked: list[MarkerSpec] = Field(default_factory=list)


class CatalogData(BaseModel):
    """Root catalog data structure."""

    types: list[TypeSpec] = Field(default_factory=list)
