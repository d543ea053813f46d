"""
Shared dependencies across the application.

The HTTP service keeps one record store per process. Routes receive it
through ``get_store`` so tests can override it with their own instance.
"""

from medlens.store import HealthRecordStore

_store = HealthRecordStore()


def get_store() -> HealthRecordStore:
    """Dependency for the process-wide record store."""
    return _store


__all__ = ["get_store"]
