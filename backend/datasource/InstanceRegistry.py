"""
Process-scoped registry of datasource instances keyed by datasource uid.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from datasource.Constants import LOG_PREFIX
from datasource.pojos.DatasourceSettings import DatasourceSettings

logger = logging.getLogger(__name__)

I = TypeVar('I')


@dataclass
class _Entry(Generic[I]):
    updated: Optional[str]
    instance: I


class InstanceRegistry(Generic[I]):
    """
    Lazily builds one instance per uid with the injected factory.

    An instance is rebuilt when its settings `updated` stamp changes; the
    stale one is handed to the disposer.
    """

    def __init__(
        self,
        factory: Callable[[DatasourceSettings], I],
        disposer: Optional[Callable[[I], Any]] = None
    ):
        self._factory = factory
        self._disposer = disposer
        self._lock = threading.Lock()
        self._instances: Dict[str, _Entry[I]] = {}

    def get(self, settings: DatasourceSettings) -> I:
        entry = self._instances.get(settings.uid)
        if entry is not None and entry.updated == settings.updated:
            return entry.instance

        with self._lock:
            entry = self._instances.get(settings.uid)
            if entry is not None and entry.updated == settings.updated:
                return entry.instance

            if entry is not None:
                logger.info(
                    "%s :: Settings changed, rebuilding instance | UID: %s | Updated: %s -> %s",
                    LOG_PREFIX,
                    settings.uid,
                    entry.updated,
                    settings.updated
                )
                self._disposeInstance(settings.uid, entry.instance)

            instance = self._factory(settings)
            self._instances[settings.uid] = _Entry(settings.updated, instance)
            return instance

    def dispose(self, uid: str) -> bool:
        with self._lock:
            entry = self._instances.pop(uid, None)
        if entry is None:
            return False
        self._disposeInstance(uid, entry.instance)
        return True

    def disposeAll(self):
        with self._lock:
            entries = list(self._instances.items())
            self._instances.clear()
        for uid, entry in entries:
            self._disposeInstance(uid, entry.instance)

    def __len__(self) -> int:
        return len(self._instances)

    def __contains__(self, uid: str) -> bool:
        return uid in self._instances

    def _disposeInstance(self, uid: str, instance: I):
        if self._disposer is None:
            return
        try:
            self._disposer(instance)
        except Exception as e:
            logger.error("%s :: Failed to dispose instance | UID: %s | Error: %s", LOG_PREFIX, uid, str(e))
