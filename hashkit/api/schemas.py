"""Request and response bodies for the hashing API."""

from pydantic import BaseModel, ConfigDict, Field


def _to_camel(name: str) -> str:
    """Convert snake_case to camelCase for JSON serialization."""
    parts = name.split("_")
    return parts[0] + "".join(p.capitalize() for p in parts[1:])


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
    )


class CostOptions(BaseModel):
    """Per-call cost overrides; omitted fields use the driver defaults."""

    rounds: int | None = None
    memory: int | None = None
    time: int | None = None
    threads: int | None = None

    def to_options(self) -> dict[str, int]:
        return self.model_dump(exclude_none=True)


class MakePayload(BaseModel):
    """Request body for POST /hashing/make."""

    value: str
    driver: str | None = None
    options: CostOptions = Field(default_factory=CostOptions)


class MakeResponse(BaseModel):
    """Response for POST /hashing/make."""

    hash: str


class CheckPayload(BaseModel):
    """Request body for POST /hashing/check."""

    value: str
    hash: str
    driver: str | None = None
    options: CostOptions = Field(default_factory=CostOptions)


class CheckResponse(BaseModel):
    """Response for POST /hashing/check."""

    valid: bool


class NeedsRehashPayload(BaseModel):
    """Request body for POST /hashing/needs-rehash."""

    hash: str
    driver: str | None = None
    options: CostOptions = Field(default_factory=CostOptions)


class NeedsRehashResponse(_CamelModel):
    """Response for POST /hashing/needs-rehash."""

    needs_rehash: bool


class InfoPayload(BaseModel):
    """Request body for POST /hashing/info."""

    hash: str


class InfoResponse(_CamelModel):
    """Response for POST /hashing/info, mirrors the digest metadata."""

    algo_name: str
    algo_id: str
    options: dict[str, int] = Field(default_factory=dict)
