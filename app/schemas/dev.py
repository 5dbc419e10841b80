"""Development tool schemas (seed/reset)."""

from pydantic import BaseModel, ConfigDict


class SeedResponse(BaseModel):
    """Documents written by POST /dev/seed or /dev/reset (0 for collections left untouched)."""

    model_config = ConfigDict(from_attributes=True)

    tenants: int
    categories: int
    services: int
