from inspect import getfile, getsourcelines
from os.path import basename
import re
from time import time
from typing import Any, Callable

from movie_booking.platform.logging.loguru_io_config import (
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MASK = '********'
MAX_CONTENT_LENGTH = 500

# key='value' / "key": "value" pairs inside repr() output
_SENSITIVE_PAIR = re.compile(
    r"""(['"]?\b(?:%s)\b['"]?\s*[:=]\s*)(['"]).*?\2""" % '|'.join(map(re.escape, SENSITIVE_KEYWORDS))
)


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    target = getattr(func, '__func__', func)
    try:
        lineno = getsourcelines(target)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(target))}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def mask_sensitive(data: Any) -> Any:
    data_str = str(data)
    masked = _SENSITIVE_PAIR.sub(rf"\1'{MASK}'", data_str)
    return data if masked == data_str else masked


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return MASK if keyword in SENSITIVE_KEYWORDS else value


def truncate_content(data: Any, max_length: int = MAX_CONTENT_LENGTH) -> Any:
    if isinstance(data, str) and len(data) > max_length:
        return f'{data[:max_length]}...(+{len(data) - max_length} chars)'
    return data
