"""Execution timing decorators for calculagraph.

Four decorators wrap a function so that every call which returns normally
emits one message with the function name and how long the call took:

    @timer_println             # fn:main cost 10ms
    @timer_log_info("us")      # fn:main cost 10043us, logged at INFO
    @timer_log_debug("ns", "main() took {}ns")

They differ only in where the message goes. A call that raises emits
nothing and the exception reaches the caller untouched.
"""

import functools
import inspect
import logging
import time
from collections.abc import Callable
from typing import Any, TypeVar

from .exceptions import ConfigurationError
from .logging_config import TRACE
from .units import Duration, TimeUnit
from .validation import USAGE, parse_args, parse_time_unit, validate_format, validate_target

logger = logging.getLogger("calculagraph.metrics")

F = TypeVar("F", bound=Callable[..., Any])

Emitter = Callable[[str], None]

TIMER_FORMAT = "{name} completed in {elapsed}{unit}"

# finish -> wrapper -> caller
CALLER_STACKLEVEL = 3


def _now() -> int:
    return time.perf_counter_ns()


def render(template: str, name: str, duration: Duration, unit: TimeUnit) -> str:
    """Fill a format string with a function name and a measured duration."""
    value = duration.in_unit(unit)
    return template.format(value, name=name, elapsed=value, unit=unit.suffix)


def _print_emitter(func: Callable[..., Any]) -> Emitter:
    return print


def _log_emitter(level: int) -> Callable[[Callable[..., Any]], Emitter]:
    def factory(func: Callable[..., Any]) -> Emitter:
        target = logging.getLogger(getattr(func, "__module__", None) or __name__)
        # Attribute the record to the caller of the wrapped function, not to finish()
        return functools.partial(target.log, level, stacklevel=CALLER_STACKLEVEL)

    return factory


def _instrument(func: F, unit: TimeUnit, template: str, emit: Emitter) -> F:
    name = func.__name__

    def finish(start: int) -> None:
        duration = Duration(_now() - start)
        emit(render(template, name, duration, unit))

    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            start = _now()
            result = await func(*args, **kwargs)
            finish(start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start = _now()
        result = func(*args, **kwargs)
        finish(start)
        return result

    return wrapper  # type: ignore[return-value]


def _timer_decorator(
    channel: str, emitter_factory: Callable[[Callable[..., Any]], Emitter]
) -> Callable[..., Any]:
    def decorate(func: F, unit: TimeUnit, template: str) -> F:
        validate_target(func)
        logger.debug(f"Instrumenting {func.__qualname__} ({channel}, unit={unit})")
        return _instrument(func, unit, template, emitter_factory(func))

    def timer(*args: Any) -> Any:
        # Bare form: @timer_println
        if args and callable(args[0]):
            if len(args) > 1:
                raise ConfigurationError(f"Invalid arguments, usage: {USAGE}", field="args")
            unit, template = parse_args(())
            return decorate(args[0], unit, template)

        unit, template = parse_args(args)

        def decorator(func: F) -> F:
            return decorate(func, unit, template)

        return decorator

    timer.__name__ = timer.__qualname__ = f"timer_{channel}"
    return timer


timer_println = _timer_decorator("println", _print_emitter)
timer_println.__doc__ = """Print the execution time to stdout after each call of the function.

Supports none, 1 or 2 arguments, [(TimeUnit[, FormatString])].
TimeUnit is one of "s", "ms" (default), "us" or "ns".
FormatString uses str.format syntax: {} or {elapsed} is the measured
value, {name} the function name and {unit} the unit suffix.

Examples:
    @timer_println
    def func(): ...

    @timer_println("ns")
    def func1(): ...

    @timer_println("ns", "func2() execution time: {}ns")
    def func2(): ...
"""

timer_log_info = _timer_decorator("log_info", _log_emitter(logging.INFO))
timer_log_info.__doc__ = """Log the execution time at INFO after each call of the function.

The record goes to the logger named after the function's module. Arguments
are the same as timer_println.
"""

timer_log_debug = _timer_decorator("log_debug", _log_emitter(logging.DEBUG))
timer_log_debug.__doc__ = """Log the execution time at DEBUG after each call of the function."""

timer_log_trace = _timer_decorator("log_trace", _log_emitter(TRACE))
timer_log_trace.__doc__ = """Log the execution time at TRACE after each call of the function."""


class Timer:
    """Context manager for timing code blocks.

    Logs the elapsed time at INFO when the block finishes without raising.

    Usage:
        with Timer("operation_name"):
            # code to time
    """

    def __init__(self, name: str, unit: Any = "ms", fmt: str | None = None) -> None:
        self.name = name
        self.unit = parse_time_unit(unit)
        self.fmt = validate_format(fmt) if fmt is not None else TIMER_FORMAT
        self.start_time: int = 0
        self.elapsed: Duration | None = None

    def __enter__(self) -> "Timer":
        self.elapsed = None
        self.start_time = _now()
        return self

    def __exit__(self, exc_type: Any, *args: Any) -> None:
        if exc_type is not None:
            return
        self.elapsed = Duration(_now() - self.start_time)
        logger.info(render(self.fmt, self.name, self.elapsed, self.unit), stacklevel=2)
