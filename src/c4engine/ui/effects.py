from __future__ import annotations
import math
import sys
import time
from typing import Callable, TypeVar

from c4engine.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC

T = TypeVar("T")

SPINNER_FRAMES = "|/-\\"
FRAME_SEC = 0.08


def _spin(label: str, seconds: float) -> None:
    for i in range(math.ceil(seconds / FRAME_SEC)):
        sys.stdout.write(f"\r{label}... {SPINNER_FRAMES[i % len(SPINNER_FRAMES)]}")
        sys.stdout.flush()
        time.sleep(FRAME_SEC)
    sys.stdout.write("\r" + " " * (len(label) + 6) + "\r")
    sys.stdout.flush()


def thinking(label: str, compute: Callable[[], T], delay_sec: float = AI_THINK_DELAY_SEC) -> T:
    """
    Run the AI's search, then hold the console until at least `delay_sec`
    has passed so quick replies do not appear instantly. A search slower
    than the delay is shown as soon as it finishes.
    """
    start = time.monotonic()
    result = compute()
    remaining = delay_sec - (time.monotonic() - start)

    if remaining > 0:
        if AI_THINKING_SPINNER:
            _spin(label, remaining)
        else:
            time.sleep(remaining)
    return result
