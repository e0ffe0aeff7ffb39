"""A handy library for measuring the execution time of functions.

    from calculagraph import timer_println

    @timer_println("ms")
    def main():
        time.sleep(0.01)

Calling main() prints ``fn:main cost 10ms``.
"""

from .exceptions import (
    CalculagraphError,
    ConfigurationError,
    InvalidFormatError,
    InvalidTargetError,
    InvalidTimeUnitError,
)
from .logging_config import TRACE, setup_logging
from .metrics import Timer, timer_log_debug, timer_log_info, timer_log_trace, timer_println
from .units import Duration, TimeUnit

__version__ = "0.1.0"

__all__ = [
    "CalculagraphError",
    "ConfigurationError",
    "Duration",
    "InvalidFormatError",
    "InvalidTargetError",
    "InvalidTimeUnitError",
    "TRACE",
    "TimeUnit",
    "Timer",
    "setup_logging",
    "timer_log_debug",
    "timer_log_info",
    "timer_log_trace",
    "timer_println",
]
