"""Pydantic models for the compose-and-send flow."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from loyalty_console.domain.entities import BroadcastMode


class ComposeFilters(BaseModel):
    """Substring filters applied to the customer list."""

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    email: str = ""
    phone_number: str = ""
    country: str = ""


class ComposeModeUpdate(BaseModel):
    mode: BroadcastMode


class ComposeMessageUpdate(BaseModel):
    """Form fields of the notification being written."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(default="", max_length=200)
    body: str = Field(default="", max_length=2000)
    image_url: str | None = None
    click_action: str | None = None


class CustomerRowRead(BaseModel):
    """Customer row of the filtered view."""

    id: str
    username: str
    email: str
    phone_number: str
    country: str
    can_receive_push: bool
    selected: bool


class DispatchSummaryRead(BaseModel):
    outcome: str
    success_count: int
    failure_count: int
    fatal_error: str | None = None


class ComposeSessionRead(BaseModel):
    """Snapshot of a compose session."""

    id: str
    status: str
    mode: BroadcastMode
    filters: ComposeFilters
    customers: list[CustomerRowRead]
    total_customers: int
    selected_count: int
    all_filtered_selected: bool
    title: str
    body: str
    image_url: str | None = None
    click_action: str | None = None
    summary: DispatchSummaryRead | None = None
    message: str | None = None


__all__ = [
    "ComposeFilters",
    "ComposeMessageUpdate",
    "ComposeModeUpdate",
    "ComposeSessionRead",
    "CustomerRowRead",
    "DispatchSummaryRead",
]
