"""Limits for the law checker, passed explicitly by the caller."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LawsConfig(BaseModel):
    """How much of the sample pool to check and when to stop."""

    model_config = {"frozen": True}

    max_samples: int = Field(default=32, ge=1)
    fail_fast: bool = False
