import pytest

from rovio_teleop.mapping import HeadCallError


class RecordingLogger:
    def __init__(self):
        self.records = []

    def _log(self, level, msg):
        self.records.append((level, msg))

    def debug(self, msg):
        self._log('debug', msg)

    def info(self, msg):
        self._log('info', msg)

    def warning(self, msg):
        self._log('warning', msg)

    def error(self, msg):
        self._log('error', msg)

    def messages(self, level):
        return [m for lvl, m in self.records if lvl == level]


class FakeHeadService:
    """Stands in for the head_position service client."""

    def __init__(self, status=0, fail=False):
        self.status = status
        self.fail = fail
        self.requests = []

    def request_head_position(self, position):
        self.requests.append(position)
        if self.fail:
            raise HeadCallError('no response')
        return self.status


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def published():
    return []


@pytest.fixture
def head():
    return FakeHeadService(status=1)


@pytest.fixture
def head_factory():
    return FakeHeadService
