import time
from collections.abc import Callable
from typing import TypeVar

from fairreview.logging.logger import Log

T = TypeVar("T")


def retry_once(
    call: Callable[[], T],
    *,
    retry_on: tuple[type[BaseException], ...],
    delay_seconds: float,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Run ``call``; on a ``retry_on`` failure wait once and run it again.

    The second failure propagates unchanged. Any other exception propagates
    from the first attempt without a retry.
    """
    try:
        return call()
    except retry_on as exc:
        Log.warning(f"Transient failure, retrying once in {delay_seconds}s: {exc}")
    sleep(delay_seconds)
    return call()
