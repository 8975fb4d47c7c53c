import pytest


class RecordingLogger:
    """Stands in for the rclpy node logger."""

    def __init__(self):
        self.records = []

    def info(self, msg):
        self.records.append(('info', msg))

    def warning(self, msg):
        self.records.append(('warning', msg))

    def error(self, msg):
        self.records.append(('error', msg))

    def debug(self, msg):
        self.records.append(('debug', msg))


@pytest.fixture
def logger():
    return RecordingLogger()
