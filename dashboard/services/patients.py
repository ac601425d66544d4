"""
Patient listing.

A listing is driven by exactly one :class:`Selector`.  Whatever the
mode, rows come back in the same total order: most recent activity
first (patients without activity last), then most recently registered,
then by ``patient_id``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional

from django.conf import settings
from django.db.models import Q

from dashboard.exceptions import InvalidArgument
from dashboard.models import Patient
from dashboard.services.activity import ActivityLog, current_day
from dashboard.services.events import data_source

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    ALL = 'all'
    ACTIVE_TODAY = 'today'
    ACTIVE_ON_DATE = 'date'
    SEARCH = 'search'


@dataclass(frozen=True)
class Selector:
    mode: Mode = Mode.ALL
    day: Optional[date] = None
    term: str = ''


@dataclass(frozen=True)
class PatientActivity:
    patient: Patient
    last_activity_date: Optional[date]


def parse_day(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` calendar date or raise InvalidArgument."""
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        raise InvalidArgument(f'date must be YYYY-MM-DD, got {value!r}') from None


def selector_from_params(*, today: Optional[str] = None, day: Optional[str] = None,
                         search: Optional[str] = None) -> Selector:
    """Pick the selector for a request from raw query values.

    Callers should pass at most one of these; if several are given the
    first in the order today, day, search wins.  Only ``today=true``
    selects today, and ``day`` is parsed only when it is the winner, so a
    malformed date next to ``today=true`` is ignored.
    """
    if (today or '').lower() == 'true':
        return Selector(Mode.ACTIVE_TODAY)
    if day:
        return Selector(Mode.ACTIVE_ON_DATE, day=parse_day(day))
    if search is not None:
        return Selector(Mode.SEARCH, term=search)
    return Selector(Mode.ALL)


def resolve_limit(limit: Optional[int]) -> int:
    ceiling = settings.PATIENT_LIST_MAX_LIMIT
    if limit is None:
        return min(settings.PATIENT_LIST_DEFAULT_LIMIT, ceiling)
    if limit < 1:
        raise InvalidArgument('limit must be a positive integer')
    return min(limit, ceiling)


def sort_rows(rows: list[PatientActivity]) -> list[PatientActivity]:
    rows = sorted(rows, key=lambda r: r.patient.patient_id)
    rows.sort(key=lambda r: r.patient.created_at, reverse=True)
    rows.sort(key=lambda r: (r.last_activity_date is not None, r.last_activity_date or date.min), reverse=True)
    return rows


def list_patients(selector: Selector, *, limit: Optional[int] = None, today: Optional[date] = None,
                  using: Optional[str] = None) -> list[PatientActivity]:
    limit = resolve_limit(limit)
    log = ActivityLog.load(using=using)
    qs = Patient.objects.using(using)

    if selector.mode is Mode.ACTIVE_TODAY:
        qs = qs.filter(patient_id__in=log.patients_active_on(today or current_day()))
    elif selector.mode is Mode.ACTIVE_ON_DATE:
        if selector.day is None:
            raise InvalidArgument('date is required')
        qs = qs.filter(patient_id__in=log.patients_active_on(selector.day))
    elif selector.mode is Mode.SEARCH and selector.term:
        term = selector.term
        qs = qs.filter(
            Q(patient_id__icontains=term) | Q(first_name__icontains=term) | Q(last_name__icontains=term)
        )

    with data_source('patient registry'):
        patients = list(qs)

    last = log.last_activity_by_patient()
    rows = sort_rows([PatientActivity(p, last.get(p.patient_id)) for p in patients])
    logger.debug('patients mode=%s matched=%d limit=%d', selector.mode.value, len(rows), limit)
    return rows[:limit]
