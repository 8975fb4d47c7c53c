"""
Unified logging with deduplication, shared by the avoidance policy and the
robot node. Works with the rclpy node logger or any object exposing
info/warning/error/debug.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class LogLevel(Enum):
    INFO = auto()
    WARN = auto()
    ERROR = auto()
    DEBUG = auto()


@dataclass
class LogEvent:
    message: str
    source: str
    level: LogLevel
    counter: int = 0
    exception: Optional[Exception] = None

    def same_identity(self, other: "LogEvent") -> bool:
        return (
            self.level == other.level and
            self.source == other.source and
            self.message == other.message
        )

    def text(self) -> str:
        if self.level == LogLevel.ERROR and self.exception is not None:
            return f"Error in {self.source}: {str(self.exception)}. {self.message}".strip()
        return f"{self.source}: {self.message}".strip() if self.source else self.message

#--------------------------------------------------------------------------------
def log_event(
    logger,
    event: LogEvent,
    last_event: Optional[LogEvent] = None,
) -> LogEvent:
    """
    Emit an event unless it repeats the previous one. Use ONE shared last_event variable.

    Behavior:
    - If event is same as last_event: increment counter and print "\\r x N"
    - Else: newline, emit log line, reset counter to 0
    """
    if last_event is not None and last_event.same_identity(event):
        event.counter = last_event.counter + 1
        print(f"\r x {event.counter}\t", end="", flush=True)
        return event

    # New event: print newline so the next log starts cleanly
    print("\n")

    if event.level == LogLevel.ERROR:
        logger.error(event.text())
    elif event.level == LogLevel.WARN:
        logger.warning(event.text())
    elif event.level == LogLevel.DEBUG:
        logger.debug(event.text())
    else:
        logger.info(event.text())

    event.counter = 0
    return event

#--------------------------------------------------------------------------------
# Convenience wrappers
def log_info(logger, message: str, source: str = "", last_event: Optional[LogEvent] = None) -> LogEvent:
    return log_event(logger, LogEvent(message=message, source=source, level=LogLevel.INFO), last_event)

#--------------------------------------------------------------------------------
def log_error(logger, error: Exception, source: str, message: str = "", last_event: Optional[LogEvent] = None) -> LogEvent:
    return log_event(logger, LogEvent(message=message, source=source, level=LogLevel.ERROR, exception=error), last_event)
