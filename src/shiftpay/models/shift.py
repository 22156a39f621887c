"""Shift input as submitted by the caller (one worked interval)."""

from __future__ import annotations

from datetime import date
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ShiftInput(BaseModel):
    """One worked interval, optionally with a single unpaid break.

    Times stay as ``HH:MM`` strings; the classifier parses them so that a bad
    value surfaces as a per-shift validation error instead of a model error.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    shift_id: str = Field(default_factory=lambda: uuid4().hex[:12])
    start_date: date
    start_time: str
    end_time: str
    ends_next_day: bool = False
    include_break: bool = False
    break_start_time: str = ""
    break_end_time: str = ""
