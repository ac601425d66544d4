"""
Activity aggregation over the unioned event stream.

Everything here is recomputed from the events on every call; the last
activity date is never stored on the patient.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from django.utils import timezone

from dashboard.services.events import ActivityEvent, load_events

logger = logging.getLogger(__name__)


def current_day() -> date:
    """Today's date in the configured ``TIME_ZONE``."""
    return timezone.localdate()


def last_activity_by_patient(events: Iterable[ActivityEvent]) -> dict[str, date]:
    last: dict[str, date] = {}
    for event in events:
        seen = last.get(event.patient_id)
        if seen is None or event.occurred_on > seen:
            last[event.patient_id] = event.occurred_on
    return last


def patients_active_on(events: Iterable[ActivityEvent], day: date) -> set[str]:
    return {event.patient_id for event in events if event.occurred_on == day}


class ActivityLog:
    """One loaded snapshot of activity events.

    Answers both the per-patient last activity question and the "who was
    seen on day D" question from the same event list, so a single request
    never mixes two reads of the event tables.
    """

    def __init__(self, events: Iterable[ActivityEvent]):
        self.events = list(events)

    @classmethod
    def load(cls, *, days: Optional[Iterable[date]] = None, using: Optional[str] = None) -> 'ActivityLog':
        log = cls(load_events(days=days, using=using))
        logger.debug('loaded %d activity events', len(log.events))
        return log

    def last_activity_by_patient(self) -> dict[str, date]:
        return last_activity_by_patient(self.events)

    def patients_active_on(self, day: date) -> set[str]:
        return patients_active_on(self.events, day)
