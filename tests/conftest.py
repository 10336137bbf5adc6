import os

os.environ.setdefault('UI', 'manual')
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

import pytest

from qtimer.manual.scheduler import Scheduler


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def calls():
    """Records the props passed to each on_timeout invocation."""
    recorded = []

    def on_timeout(props):
        recorded.append(props)

    on_timeout.recorded = recorded
    return on_timeout
