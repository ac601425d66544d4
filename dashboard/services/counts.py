from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from dashboard.models import Patient
from dashboard.services.activity import ActivityLog, current_day
from dashboard.services.events import data_source

logger = logging.getLogger(__name__)


def count_patients(day: Optional[date] = None, *, today: Optional[date] = None,
                   using: Optional[str] = None) -> dict:
    """Return ``{'today', 'date', 'all'}`` patient counters.

    Both day counters are distinct patients with any encounter or
    treatment on that day, taken from one load of the event tables.
    ``all`` is the registry size and ignores activity.
    """
    today = today or current_day()
    day = day or today
    log = ActivityLog.load(days={today, day}, using=using)
    with data_source('patient registry'):
        total = Patient.objects.using(using).count()
    counts = {
        'today': len(log.patients_active_on(today)),
        'date': len(log.patients_active_on(day)),
        'all': total,
    }
    logger.debug('patient counts for %s: %s', day, counts)
    return counts
