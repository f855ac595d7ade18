"""Shared pydantic base for configuration and API payload models."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model; unknown fields sent by the API are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")
