"""
Activity event sources.

Patient activity is recorded in two independent tables.  Encounters
contribute the calendar date of their ``created_at`` instant, truncated
in the configured ``TIME_ZONE`` (the same clock that defines "today");
treatments contribute their explicit ``visit_date``.  Both are
normalized into :class:`ActivityEvent` values and concatenated without
deduplication.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator, Optional

from django.db import DatabaseError
from django.db.models.functions import TruncDate

from dashboard.exceptions import DataSourceError
from dashboard.models import Encounter, Treatment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActivityEvent:
    patient_id: str
    occurred_on: date


@contextmanager
def data_source(what: str) -> Iterator[None]:
    """Re-raise backing store failures (including timeouts) as DataSourceError."""
    try:
        yield
    except DatabaseError as exc:
        logger.error('%s query failed', what, exc_info=True)
        raise DataSourceError(f'{what} query failed: {exc}') from exc


def encounter_events(days: Optional[list[date]] = None, using: Optional[str] = None):
    qs = Encounter.objects.using(using).annotate(occurred_on=TruncDate('created_at'))
    if days is not None:
        qs = qs.filter(occurred_on__in=days)
    return qs.values_list('patient_id', 'occurred_on')


def treatment_events(days: Optional[list[date]] = None, using: Optional[str] = None):
    qs = Treatment.objects.using(using)
    if days is not None:
        qs = qs.filter(visit_date__in=days)
    return qs.values_list('patient_id', 'visit_date')


def load_events(*, days: Optional[Iterable[date]] = None, using: Optional[str] = None) -> list[ActivityEvent]:
    """Return the union of encounter and treatment events.

    ``days`` restricts both origins to the given calendar dates.  An empty
    result means there was no activity; failures raise DataSourceError.
    """
    day_list = None
    if days is not None:
        day_list = sorted(set(days))
        if not day_list:
            return []
    with data_source('activity events'):
        rows = list(encounter_events(day_list, using))
        rows.extend(treatment_events(day_list, using))
    return [ActivityEvent(patient_id, occurred_on) for patient_id, occurred_on in rows]
