"""
Fetch → state → render lifecycle shared by every section.

Each fetch target is tracked as a `FetchState` (loading, error or ready).
List sections fetch one collection per league through `fetch_by_league`,
which runs the three requests in a thread pool and yields each league's
state as soon as that request settles, so one slow or failing league does
not hold back the others.

Detail sections do one primary fetch (`run_primary`, whose failure blocks
the section) and a handful of enrichment fetches through `fan_out`, where
each failure is logged and replaced by an empty default.

Results are kept between Streamlit reruns in a `MountedState`, keyed by a
mount key (section, visit generation, identifier). A result produced for
an older mount key is dropped instead of overwriting newer data.
"""

from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, MutableMapping, Optional, Tuple

from common.constants import League
from common.errors import SportsDataError

logger = logging.getLogger(__name__)

_pool = ThreadPoolExecutor(max_workers=8, thread_name_prefix="sportsdb")


class Status(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


@dataclass(frozen=True)
class FetchState:
    status: Status = Status.LOADING
    data: Any = None
    message: Optional[str] = None

    @classmethod
    def loading(cls) -> "FetchState":
        return cls(Status.LOADING)

    @classmethod
    def error(cls, message: str) -> "FetchState":
        return cls(Status.ERROR, message=message or "Error desconocido")

    @classmethod
    def ready(cls, data: Any) -> "FetchState":
        return cls(Status.READY, data=data)

    @property
    def is_loading(self) -> bool:
        return self.status is Status.LOADING

    @property
    def is_error(self) -> bool:
        return self.status is Status.ERROR

    @property
    def is_empty(self) -> bool:
        """Ready with nothing to show (None, empty list or empty DataFrame)."""
        if self.status is not Status.READY:
            return False
        if self.data is None:
            return True
        if hasattr(self.data, "empty"):
            return bool(self.data.empty)
        try:
            return len(self.data) == 0
        except TypeError:
            return False


def run_primary(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> FetchState:
    """Run a load-bearing fetch; a `SportsDataError` becomes an error state."""
    try:
        return FetchState.ready(fn(*args, **kwargs))
    except SportsDataError as exc:
        logger.error("%s failed: %s", getattr(fn, "__name__", fn), exc)
        return FetchState.error(str(exc))


def best_effort(fn: Callable[[], Any], default: Any, label: str) -> Any:
    """Run an enrichment fetch; any failure is logged and `default` returned."""
    try:
        return fn()
    except Exception as exc:
        logger.warning("Enrichment fetch %r failed, showing it empty: %s", label, exc)
        return default


def fan_out(tasks: Dict[str, Tuple[Callable[[], Any], Any]]) -> Dict[str, Any]:
    """
    Run `{name: (fn, default)}` concurrently and return `{name: value}`.
    Every entry is present in the result; failed tasks carry their default.
    """
    futures = {
        name: _pool.submit(best_effort, fn, default, name)
        for name, (fn, default) in tasks.items()
    }
    return {name: fut.result() for name, fut in futures.items()}


def fetch_by_league(loader: Callable[[League], Any],
                    leagues: Iterable[League]) -> Iterator[Tuple[str, FetchState]]:
    """
    Load one collection per league in parallel and yield `(league.key, state)`
    in completion order. There is no barrier: callers render each league as
    soon as it is yielded.
    """
    futures = {_pool.submit(run_primary, loader, lg): lg.key for lg in leagues}
    for fut in as_completed(futures):
        yield futures[fut], fut.result()


class MountedState:
    """
    Section state kept in the session store across reruns.

    The store entry is reset whenever the section is mounted with a new key,
    and `commit` ignores writes tagged with a key that is no longer current.
    """

    def __init__(self, store: MutableMapping[str, Any], section: str, mount_key: Hashable) -> None:
        self._store = store
        self._slot = f"section::{section}"
        self.mount_key = mount_key
        current = store.get(self._slot)
        if not isinstance(current, dict) or current.get("mount_key") != mount_key:
            store[self._slot] = {"mount_key": mount_key, "values": {}}

    @property
    def values(self) -> Dict[str, Any]:
        return self._store[self._slot]["values"]

    def is_current(self, mount_key: Hashable) -> bool:
        return self._store.get(self._slot, {}).get("mount_key") == mount_key

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def __contains__(self, key: str) -> bool:
        return key in self.values

    def commit(self, key: str, value: Any, mount_key: Optional[Hashable] = None) -> bool:
        """Store `value` unless it was produced for a stale mount key."""
        tag = self.mount_key if mount_key is None else mount_key
        if not self.is_current(tag):
            logger.debug("Dropping stale result %r for %r", key, tag)
            return False
        self.values[key] = value
        return True

    def set(self, key: str, value: Any) -> None:
        self.values[key] = value
