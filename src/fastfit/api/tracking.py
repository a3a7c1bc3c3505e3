"""Endpoints for activity inputs, budget and the consumption ledger."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from fastfit.api.models import (
    ActivityOut,
    ActivityRecordOut,
    ActivityUpdate,
    BudgetOut,
    LedgerAdd,
    LedgerRecordOut,
)

if TYPE_CHECKING:
    from fastfit.services.session import SessionContext

router = APIRouter(tags=["tracking"])


def _session(request: Request) -> SessionContext:
    return request.app.state.container.session


def _activity_out(session: SessionContext) -> ActivityOut:
    feed = session.activity_feed.state
    return ActivityOut(
        steps=session.activity.steps,
        strength_minutes=session.activity.strength_minutes,
        feed_connected=feed.connected,
        feed_activities=[
            ActivityRecordOut(
                name=activity.name,
                category=activity.category,
                calories=activity.calories,
                duration=activity.duration,
                icon=activity.icon,
            )
            for activity in feed.activities
        ],
    )


@router.get("/budget")
async def budget(request: Request) -> BudgetOut:
    """Return the current goals and remaining calories."""
    return BudgetOut.from_state(_session(request).budget())


@router.get("/activity")
async def get_activity(request: Request) -> ActivityOut:
    return _activity_out(_session(request))


@router.put("/activity")
async def update_activity(payload: ActivityUpdate, request: Request) -> ActivityOut:
    """Move the step and strength sliders."""
    session = _session(request)
    session.activity.update(
        steps=payload.steps, strength_minutes=payload.strength_minutes
    )
    return _activity_out(session)


@router.post("/activity/feed/connect")
async def connect_feed(request: Request) -> ActivityOut:
    """Fetch workouts from the activity feed."""
    session = _session(request)
    await session.activity_feed.connect()
    return _activity_out(session)


@router.post("/activity/feed/disconnect")
async def disconnect_feed(request: Request) -> ActivityOut:
    session = _session(request)
    session.activity_feed.disconnect()
    return _activity_out(session)


@router.get("/ledger")
async def list_ledger(request: Request) -> list[LedgerRecordOut]:
    """Return consumed items in the order they were logged."""
    return [
        LedgerRecordOut.from_record(record)
        for record in _session(request).ledger.records
    ]


@router.post("/ledger", status_code=status.HTTP_201_CREATED)
async def add_to_ledger(payload: LedgerAdd, request: Request) -> LedgerRecordOut:
    """Log a catalog item as eaten."""
    record = _session(request).log_item(payload.item_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return LedgerRecordOut.from_record(record)


@router.delete("/ledger/index/{index}")
async def remove_ledger_index(index: int, request: Request) -> LedgerRecordOut:
    record = _session(request).ledger.remove_at(index)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return LedgerRecordOut.from_record(record)


@router.delete("/ledger/{record_id}")
async def remove_ledger_record(record_id: UUID, request: Request) -> LedgerRecordOut:
    record = _session(request).ledger.remove_by_id(record_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return LedgerRecordOut.from_record(record)
