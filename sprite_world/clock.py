"""Fixed-rate tick clock.

Decouples the simulation rate from the host's frame rate. The host reports
how much real time passed since its last frame; the clock banks it in an
accumulator and pays out one tick per whole ``tick_duration``. Leftover time
carries into the next frame, so over a long run the world ticks exactly
``fps`` times per second no matter how irregular frames are.

The clock is a frozen value like everything else: :func:`accumulate` and
:func:`advance` return the updated clock alongside their results.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from sprite_world.config import DESIRED_FPS
from sprite_world.state import State
from sprite_world.step import step


@dataclass(frozen=True)
class TickClock:
    """Tick accumulator.

    Attributes:
        tick_duration: Seconds per simulation tick.
        accumulator: Banked seconds not yet turned into ticks.
        max_ticks_per_frame: Optional cap on ticks paid out per call; time
            beyond the cap is dropped instead of banked.
    """

    tick_duration: float
    accumulator: float = 0.0
    max_ticks_per_frame: Optional[int] = None

    @classmethod
    def from_fps(
        cls, fps: int = DESIRED_FPS, max_ticks_per_frame: Optional[int] = None
    ) -> "TickClock":
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        return cls(tick_duration=1.0 / fps, max_ticks_per_frame=max_ticks_per_frame)


def accumulate(clock: TickClock, elapsed: float) -> Tuple[TickClock, int]:
    """Bank ``elapsed`` seconds and return how many ticks are now due.

    Raises:
        ValueError: If ``elapsed`` is negative or the tick duration is not
            positive.
    """
    if elapsed < 0:
        raise ValueError(f"elapsed must be >= 0, got {elapsed}")
    if clock.tick_duration <= 0:
        raise ValueError(f"tick_duration must be positive, got {clock.tick_duration}")

    banked = clock.accumulator + elapsed
    whole, banked = divmod(banked, clock.tick_duration)
    ticks = int(whole)

    cap = clock.max_ticks_per_frame
    if cap is not None and ticks > cap:
        ticks = cap
    return replace(clock, accumulator=banked), ticks


def advance(
    state: State, clock: TickClock, elapsed: float
) -> Tuple[State, TickClock, int]:
    """Run every tick due after ``elapsed`` seconds before returning.

    Returns:
        Tuple[State, TickClock, int]: New state, updated clock and the number
            of ticks that were run.
    """
    clock, ticks = accumulate(clock, elapsed)
    for _ in range(ticks):
        state = step(state)
    return state, clock, ticks
