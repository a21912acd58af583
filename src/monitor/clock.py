"""Wall-clock ticker for the dashboard header.

Formats time as ``HH:MM:SS`` (24h) and the date as ``<day> <month> <year>``
with month names from a small locale table.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Optional, Tuple

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from config.config import CLOCK_TICK_SEC, LOCALE
from utils.logging import get_logger

logger = get_logger(__name__)

MONTH_NAMES: Dict[str, Tuple[str, ...]] = {
    "id": (
        "Januari", "Februari", "Maret", "April", "Mei", "Juni",
        "Juli", "Agustus", "September", "Oktober", "November", "Desember",
    ),
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
}


@dataclass(frozen=True)
class ClockReading:
    time: str
    date: str


def format_time(now: datetime) -> str:
    return now.strftime("%H:%M:%S")


def format_date(now: datetime, locale: str = LOCALE) -> str:
    months = MONTH_NAMES.get(locale, MONTH_NAMES["en"])
    return f"{now.day} {months[now.month - 1]} {now.year}"


def read_clock(now: Optional[datetime] = None, locale: str = LOCALE) -> ClockReading:
    now = now or datetime.now()
    return ClockReading(time=format_time(now), date=format_date(now, locale))


class Clock:
    """Free-running ticker that publishes a `ClockReading` every tick.

    Streamlit re-renders the header on each rerun and only needs
    `read_clock()`; this class serves hosts that want a push callback.
    """

    def __init__(
        self,
        on_tick: Callable[[ClockReading], None],
        locale: str = LOCALE,
        tick_sec: float = CLOCK_TICK_SEC,
        scheduler: Optional[BackgroundScheduler] = None,
    ):
        self.on_tick = on_tick
        self.locale = locale
        self.tick_sec = tick_sec
        self.scheduler = scheduler or BackgroundScheduler()
        self._job = None
        self.current: Optional[ClockReading] = None

    @property
    def running(self) -> bool:
        return self._job is not None

    def tick(self) -> ClockReading:
        self.current = read_clock(locale=self.locale)
        self.on_tick(self.current)
        return self.current

    def start(self) -> None:
        if self._job is not None:
            return
        if not self.scheduler.running:
            self.scheduler.start()
        self._job = self.scheduler.add_job(
            func=self.tick,
            trigger=IntervalTrigger(seconds=self.tick_sec),
            id=f"clock_{id(self)}",
            name="Clock tick",
            max_instances=1,
            coalesce=True,
            replace_existing=True,
        )
        self.tick()
        logger.debug("Clock started")

    def stop(self) -> None:
        if self._job is None:
            return
        job, self._job = self._job, None
        try:
            job.remove()
        except JobLookupError:
            pass
        logger.debug("Clock stopped")
