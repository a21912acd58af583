"""Test configuration and shared fixtures."""

from unittest.mock import Mock

import pytest
import requests

from config.models import DashboardConfig
from monitor.poller import SensorPoller
from helpers import make_payload, make_response


@pytest.fixture
def session():
    """HTTP session whose `get` returns a valid reading by default."""
    fake = Mock(spec=requests.Session)
    fake.get.return_value = make_response(make_payload())
    return fake


@pytest.fixture
def scheduler():
    """Scheduler stand-in that records jobs instead of running them."""
    fake = Mock()
    fake.running = True
    fake.add_job.side_effect = lambda *args, **kwargs: Mock(name=kwargs.get("id", "job"))
    return fake


@pytest.fixture
def notifications():
    return []


@pytest.fixture
def poller(session, scheduler, notifications):
    config = DashboardConfig(poll_interval_sec=1.0, history_capacity=10)
    return SensorPoller(config, session=session, scheduler=scheduler, notifier=notifications.append)
