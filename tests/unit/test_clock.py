"""Tests for clock formatting and the ticker."""

from datetime import datetime
from unittest.mock import Mock

from monitor.clock import Clock, ClockReading, format_date, format_time, read_clock


def test_format_time_is_24_hour():
    assert format_time(datetime(2024, 8, 17, 21, 5, 9)) == "21:05:09"


def test_format_date_indonesian_months():
    assert format_date(datetime(2024, 8, 17), locale="id") == "17 Agustus 2024"


def test_format_date_english_months():
    assert format_date(datetime(2024, 1, 5), locale="en") == "5 January 2024"


def test_unknown_locale_falls_back_to_english():
    assert format_date(datetime(2024, 3, 1), locale="xx") == "1 March 2024"


def test_read_clock_uses_given_time():
    reading = read_clock(datetime(2024, 12, 31, 23, 59, 59), locale="id")

    assert reading == ClockReading(time="23:59:59", date="31 Desember 2024")


def test_clock_start_ticks_and_schedules():
    scheduler = Mock()
    scheduler.running = True
    readings = []
    clock = Clock(readings.append, scheduler=scheduler)

    clock.start()
    clock.start()

    assert clock.running
    assert len(readings) == 1
    scheduler.add_job.assert_called_once()
    assert scheduler.add_job.call_args.kwargs["trigger"].interval.total_seconds() == 1.0


def test_clock_stop_removes_job():
    scheduler = Mock()
    scheduler.running = True
    clock = Clock(lambda reading: None, scheduler=scheduler)
    clock.start()
    job = scheduler.add_job.return_value

    clock.stop()
    clock.stop()

    assert not clock.running
    job.remove.assert_called_once()
