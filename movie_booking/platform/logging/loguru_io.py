"""
@Logger.io - call tracing decorator

Logs the (masked, optionally truncated) arguments and return value of sync
and async callables at DEBUG, and logs a raised exception once at the
innermost decorated frame: CustomBaseError subclasses at ERROR without a
traceback, anything else with one. Calls slower than `slow_call_seconds`
are reported at WARNING regardless of DEBUG.
"""

from collections.abc import Awaitable
from functools import wraps
from inspect import iscoroutinefunction
import time
import types
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from movie_booking.platform.config.core_setting import settings
from movie_booking.platform.exception.exceptions import CustomBaseError
from movie_booking.platform.logging.loguru_io_config import (
    ExtraField,
    call_depth_var,
    custom_logger,
)
from movie_booking.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    get_chain_start_time,
    mask_sensitive,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)

_F = TypeVar('_F', bound=Callable[..., Any])

DEFAULT_SLOW_CALL_SECONDS = 2.0


class LoguruIO:
    def __init__(
        self,
        custom_logger: 'LoguruLogger',
        *,
        reraise: bool = True,
        truncate_content: bool = False,
        slow_call_seconds: float = DEFAULT_SLOW_CALL_SECONDS,
    ) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.slow_call_seconds = slow_call_seconds
        self.extra: dict[str, Any] = {}
        self.depth = 2  # skip the hook and the wrapper: report the caller

    def _bound(self) -> 'LoguruLogger':
        return self._custom_logger.bind(**self.extra).opt(depth=self.depth)

    def _before(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> float:
        call_depth_var.set(call_depth_var.get() + 1)
        self.extra[ExtraField.CHAIN_START_TIME] = get_chain_start_time()
        if settings.DEBUG:
            self._bound().debug(
                f'args: {self.mask_sensitive(args)}, kwargs: {self.mask_sensitive(kwargs)}'
            )
        return time.perf_counter()

    def _after(self, return_value: Any, started: float) -> None:
        elapsed = time.perf_counter() - started
        if elapsed >= self.slow_call_seconds:
            self._bound().warning(f'🐢 slow call: {elapsed:.3f}s')
        if settings.DEBUG:
            self._bound().debug(f'return: {self.mask_sensitive(return_value)}')

    def _on_error(self, e: Exception) -> None:
        # An exception bubbling through several decorated frames is logged once
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]
        if isinstance(e, CustomBaseError):
            self._bound().error(f'{type(e).__name__}: {e}')
        else:
            self._bound().exception(f'{type(e).__name__}: {e}')

    def _hide_from_traceback(self, func: Callable[..., Any]) -> Callable[..., Any]:
        func.__code__ = func.__code__.replace(  # type: ignore[attr-defined]
            co_filename=cast(types.FunctionType, self._custom_logger.catch).__code__.co_filename
        )
        return func

    def mask_sensitive(self, data: Any) -> Any:
        if isinstance(data, dict):
            masked: Any = {
                key: self.mask_sensitive(should_mask_keyword(key, value))
                for key, value in data.items()
            }
        elif isinstance(data, list | tuple):
            masked = type(data)(self.mask_sensitive(item) for item in data)
        else:
            masked = mask_sensitive(data)
        return truncate_content(masked) if self.truncate_content else masked

    def __call__(self, func: _F) -> _F:
        self.extra[ExtraField.CALL_TARGET] = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    started = self._before(args, kwargs)
                    return_value = await cast(Awaitable[Any], func(*args, **kwargs))
                    self._after(return_value, started)
                    return return_value
                except Exception as e:
                    self._on_error(e)
                    if self.reraise:
                        raise
                    return None
                finally:
                    reset_call_depth()

            return cast(_F, self._hide_from_traceback(async_wrapper))

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                started = self._before(args, kwargs)
                return_value = func(*args, **kwargs)
                self._after(return_value, started)
                return return_value
            except Exception as e:
                self._on_error(e)
                if self.reraise:
                    raise
                return None
            finally:
                reset_call_depth()

        return cast(_F, self._hide_from_traceback(sync_wrapper))


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(
        func: None = ...,
        *,
        reraise: bool = ...,
        truncate_content: bool = ...,
        slow_call_seconds: float = ...,
    ) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None,
        *,
        reraise: bool = True,
        truncate_content: bool = True,
        slow_call_seconds: float = DEFAULT_SLOW_CALL_SECONDS,
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(
            custom_logger,
            reraise=reraise,
            truncate_content=truncate_content,
            slow_call_seconds=slow_call_seconds,
        )
        return decorator(func) if func else decorator
