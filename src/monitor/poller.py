"""Polling core: connection state, periodic fetches, and the sample history.

One `SensorPoller` owns everything a dashboard session needs:

- the endpoint URL typed by the user
- the Connected/Disconnected toggle
- a repeating APScheduler job that GETs the endpoint every poll interval
- the latest sample plus a bounded `SampleHistory` for the charts
- pending user-facing notifications (validation and fetch errors)

Every poll runs under a generation number. `connect()`, `disconnect()` and a
failed poll bump the generation, so a response that arrives after the state
changed is dropped instead of mutating the store.

The scheduled job only holds a weak reference to its poller. When the owner
drops the poller (a Streamlit session ending, for instance) the job is
removed, and an optional `is_alive` callback lets the owner stop polling
before garbage collection gets there.
"""

import threading
import weakref
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Deque, List, Optional

import requests
from apscheduler.job import Job
from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from config.models import DashboardConfig
from config.schemas import Notification
from monitor.history import SampleHistory
from monitor.sample import Sample, parse_payload
from utils.logging import get_logger

logger = get_logger(__name__)

EMPTY_URL_MESSAGE = "Please enter the API URL first"
FETCH_FAILED_MESSAGE = "Failed to fetch data. Please check your API URL."


class ConnectionState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


class PollHandle:
    """Cancellation handle for the repeating poll job."""

    def __init__(self, job: Job, generation: int):
        self._job = job
        self.generation = generation
        self._cancelled = False

    @property
    def active(self) -> bool:
        return not self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        try:
            self._job.remove()
        except JobLookupError:
            # scheduler already shut down or job removed elsewhere
            pass


def _run_poll(poller_ref: 'weakref.ref[SensorPoller]', generation: int) -> bool:
    """Scheduler entry point; a collected poller means the job is orphaned."""
    poller = poller_ref()
    if poller is None:
        return False
    return poller._poll(generation)


@dataclass
class PollerSnapshot:
    """Consistent read of the poller state for rendering."""
    state: ConnectionState
    api_url: str
    current: Optional[Sample]
    history: List[Sample]
    capacity: int
    polls_ok: int = 0
    polls_failed: int = 0
    last_success_at: Optional[datetime] = None
    last_error: Optional[str] = None
    notifications: List[Notification] = field(default_factory=list)

    @property
    def connected(self) -> bool:
        return self.state is ConnectionState.CONNECTED


class SensorPoller:
    """Periodically fetches sensor readings from a user-supplied URL."""

    def __init__(
        self,
        config: Optional[DashboardConfig] = None,
        session: Optional[requests.Session] = None,
        scheduler: Optional[BackgroundScheduler] = None,
        notifier: Optional[Callable[[Notification], None]] = None,
        is_alive: Optional[Callable[[], bool]] = None,
    ):
        self.config = config or DashboardConfig()
        self.session = session or requests.Session()
        self.scheduler = scheduler or BackgroundScheduler()
        self.notifier = notifier
        self.is_alive = is_alive
        self.history = SampleHistory(self.config.history_capacity)

        self._lock = threading.RLock()
        self._api_url = self.config.default_api_url.strip()
        self._state = ConnectionState.DISCONNECTED
        self._current: Optional[Sample] = None
        self._generation = 0
        self._handle: Optional[PollHandle] = None
        self._finalizer: Optional[weakref.finalize] = None
        self._notifications: Deque[Notification] = deque()

        # Counters for the status panel
        self._polls_ok = 0
        self._polls_failed = 0
        self._last_success_at: Optional[datetime] = None
        self._last_error: Optional[str] = None

    # ---- State accessors ----
    @property
    def api_url(self) -> str:
        with self._lock:
            return self._api_url

    @property
    def state(self) -> ConnectionState:
        with self._lock:
            return self._state

    @property
    def current(self) -> Optional[Sample]:
        with self._lock:
            return self._current

    @property
    def connected(self) -> bool:
        return self.state is ConnectionState.CONNECTED

    def set_api_url(self, url: str) -> None:
        """Store the endpoint URL; emptiness is checked on connect."""
        with self._lock:
            self._api_url = (url or "").strip()

    # ---- Lifecycle ----
    def connect(self) -> Optional[PollHandle]:
        """Start polling: one immediate fetch, then one per poll interval.

        Returns:
            The handle of the repeating job, or None when the URL is empty.
        """
        with self._lock:
            url = self._api_url
            if not url:
                notification = self._queue_notification("error", EMPTY_URL_MESSAGE)
            elif self._state is ConnectionState.CONNECTED and self._handle is not None:
                return self._handle
            else:
                notification = None
                self._generation += 1
                generation = self._generation
                self._state = ConnectionState.CONNECTED

                if not self.scheduler.running:
                    self.scheduler.start()
                job = self.scheduler.add_job(
                    func=_run_poll,
                    trigger=IntervalTrigger(seconds=self.config.poll_interval_sec),
                    args=[weakref.ref(self), generation],
                    id=f"sensor_poll_{id(self)}",
                    name="Sensor poll",
                    max_instances=1,
                    coalesce=True,
                    replace_existing=True,
                )
                handle = PollHandle(job, generation)
                self._handle = handle
                # Remove the job if the poller is dropped while connected
                self._finalizer = weakref.finalize(self, handle.cancel)

        if notification is not None:
            logger.warning("Connect attempted without an API URL")
            self._dispatch(notification)
            return None

        logger.info(f"Connected to {url} (interval: {self.config.poll_interval_sec}s)")
        self._poll(generation)
        return handle

    def disconnect(self) -> None:
        """Stop polling and clear the current sample; the history is kept."""
        with self._lock:
            self._generation += 1
            self._state = ConnectionState.DISCONNECTED
            self._current = None
            handle = self._release_handle()

        if handle is not None:
            handle.cancel()
        logger.info("Disconnected")

    def toggle(self) -> ConnectionState:
        """Connect/disconnect button behaviour."""
        if self.connected:
            self.disconnect()
        else:
            self.connect()
        return self.state

    def shutdown(self) -> None:
        """Release the scheduler thread and the HTTP session."""
        self.disconnect()
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
        self.session.close()

    def _release_handle(self) -> Optional[PollHandle]:
        # Caller holds the lock
        handle, self._handle = self._handle, None
        if self._finalizer is not None:
            self._finalizer.detach()
            self._finalizer = None
        return handle

    # ---- Polling ----
    def poll(self) -> bool:
        """Fetch once under the current generation. Returns True on success."""
        with self._lock:
            generation = self._generation
        return self._poll(generation)

    def _poll(self, generation: int) -> bool:
        with self._lock:
            if generation != self._generation:
                return False
            url = self._api_url
        if not url:
            return False

        if self.is_alive is not None and not self.is_alive():
            logger.info("Owner is gone, stopping the poll job")
            self.disconnect()
            return False

        try:
            response = self.session.get(url, timeout=self.config.request_timeout_sec)
            response.raise_for_status()
            sample = parse_payload(response.json())
        except (requests.RequestException, ValueError) as e:
            # ValueError covers JSON decoding and payload validation failures
            logger.error(f"Error fetching data from {url}: {e}")
            self._on_failure(generation, e)
            return False
        except Exception as e:
            logger.error(f"Unexpected error polling {url}: {type(e).__name__}: {e}", exc_info=True)
            self._on_failure(generation, e)
            return False

        return self._on_success(generation, sample)

    def _on_success(self, generation: int, sample: Sample) -> bool:
        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding stale poll result")
                return False
            self.history.append(sample)
            self._current = sample
            self._state = ConnectionState.CONNECTED
            self._polls_ok += 1
            self._last_success_at = sample.received_at
        logger.debug(f"Processed sample: {sample.to_dict()}")
        return True

    def _on_failure(self, generation: int, error: Exception) -> None:
        with self._lock:
            if generation != self._generation:
                logger.debug(f"Discarding stale poll failure: {error}")
                return
            self._generation += 1
            self._state = ConnectionState.DISCONNECTED
            self._polls_failed += 1
            self._last_error = str(error)
            handle = self._release_handle()
            notification = self._queue_notification("error", FETCH_FAILED_MESSAGE)

        if handle is not None:
            handle.cancel()
        self._dispatch(notification)

    # ---- Notifications & snapshots ----
    def _queue_notification(self, level: str, message: str) -> Notification:
        notification: Notification = {"level": level, "message": message}
        with self._lock:
            self._notifications.append(notification)
        return notification

    def _dispatch(self, notification: Notification) -> None:
        """Hand a queued notification to the callback; never under the lock."""
        if self.notifier is not None:
            self.notifier(notification)

    def drain_notifications(self) -> List[Notification]:
        """Pop pending notifications so each one is shown once."""
        with self._lock:
            pending = list(self._notifications)
            self._notifications.clear()
        return pending

    def snapshot(self, drain: bool = True) -> PollerSnapshot:
        with self._lock:
            snap = PollerSnapshot(
                state=self._state,
                api_url=self._api_url,
                current=self._current,
                history=self.history.samples(),
                capacity=self.history.capacity,
                polls_ok=self._polls_ok,
                polls_failed=self._polls_failed,
                last_success_at=self._last_success_at,
                last_error=self._last_error,
            )
            if drain:
                snap.notifications = self.drain_notifications()
        return snap
