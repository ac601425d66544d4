from __future__ import annotations

from typing import Optional

from dashboard.models import Service
from dashboard.services.events import data_source


def list_services(using: Optional[str] = None) -> list[dict]:
    with data_source('services'):
        services = list(Service.objects.using(using).order_by('name', 'pk'))
    return [{
        'id': s.id,
        'code': s.code,
        'name': s.name,
        'price': float(s.price),
        'category': s.category,
    } for s in services]
