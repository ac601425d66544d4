"""
Database router sending dashboard reads to the optional read replica.

Enabled only when ``DB_REPLICA_URL`` is configured; see settings.
"""
from __future__ import annotations

from django.conf import settings


class ReadReplicaRouter:
    replica_alias = 'replica'

    def db_for_read(self, model, **hints):
        if self.replica_alias in settings.DATABASES:
            return self.replica_alias
        return 'default'

    def db_for_write(self, model, **hints):
        return 'default'

    def allow_relation(self, obj1, obj2, **hints):
        # Both aliases point at the same logical database
        return True

    def allow_migrate(self, db, app_label, model_name=None, **hints):
        return db == 'default'
