"""Data models for todo."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


def now_epoch() -> int:
    """Current time as whole seconds since the epoch."""
    return int(datetime.now().timestamp())


class Task(BaseModel):
    """A single to-do item.

    Field order here is the field order on disk. Validation is strict so a
    hand-edited record with a quoted id or a "yes" flag is rejected rather
    than coerced.
    """

    model_config = ConfigDict(strict=True)

    id: int = Field(gt=0)
    text: str
    done: bool = False
    created_at: int = Field(ge=0)
