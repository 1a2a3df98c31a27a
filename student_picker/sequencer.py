# sequencer.py - Reveal animation state machine (loading -> fade-in -> blink)

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Phase(Enum):
    IDLE = "idle"
    LOADING = "loading"
    FADING_IN = "fading_in"
    BLINKING = "blinking"


class SequencerBusy(RuntimeError):
    """start() was called while a sequence is still running."""


@dataclass(frozen=True)
class TickResult:
    """What the host should draw after one tick.

    Attributes:
        phase: Phase after the tick was applied
        progress: Loading fraction (ticks / budget); exceeds 1 on the commit tick
        opacity: Result opacity, 0.0 to 1.0
        highlighted: Blink state of the result
        pick: Return value of the commit callback, set only on the commit tick
        finished: True on the tick that returns the sequencer to IDLE
    """

    phase: Phase
    progress: float = 0.0
    opacity: float = 0.0
    highlighted: bool = False
    pick: Any = None
    finished: bool = False


class AnimationSequencer:
    """Drives the reveal animation one tick at a time.

    The sequencer owns no timer. The host calls tick() whenever the timer of
    the active phase fires, so phases may run on different periods. The commit
    callback is invoked exactly once, synchronously, when loading completes.
    """

    def __init__(self, loading_ticks: int = 40, fade_step: float = 0.1, blink_ticks: int = 6):
        if loading_ticks < 1:
            raise ValueError("loading_ticks must be positive")
        if fade_step <= 0:
            raise ValueError("fade_step must be positive")
        if blink_ticks < 1:
            raise ValueError("blink_ticks must be positive")
        self.loading_ticks = loading_ticks
        self.fade_step = fade_step
        self.blink_ticks = blink_ticks
        self._reset()

    def _reset(self):
        self._phase = Phase.IDLE
        self._on_commit: Optional[Callable[[], Any]] = None
        self._loading_count = 0
        self._fade_count = 0
        self._blink_count = 0
        self._progress = 0.0
        self._opacity = 0.0
        self._highlighted = False

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def is_idle(self) -> bool:
        return self._phase is Phase.IDLE

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def opacity(self) -> float:
        return self._opacity

    @property
    def highlighted(self) -> bool:
        return self._highlighted

    def start(self, on_commit: Callable[[], Any]):
        """Begin a new sequence. on_commit runs when loading completes."""
        if self._phase is not Phase.IDLE:
            raise SequencerBusy(f"sequence already running ({self._phase.value})")
        self._reset()
        self._on_commit = on_commit
        self._enter(Phase.LOADING)

    def cancel(self) -> bool:
        """Abort the running sequence without committing. Returns True if one was running."""
        if self._phase is Phase.IDLE:
            return False
        logger.debug("Sequence cancelled during %s", self._phase.value)
        self._reset()
        return True

    def tick(self, source: Optional[Phase] = None) -> TickResult:
        """Advance the active phase by one tick.

        source is the phase whose timer fired. Ticks from a timer that no
        longer matches the active phase are ignored.
        """
        if self._phase is Phase.IDLE:
            return self._snapshot()
        if source is not None and source is not self._phase:
            return self._snapshot()

        if self._phase is Phase.LOADING:
            return self._tick_loading()
        if self._phase is Phase.FADING_IN:
            return self._tick_fade()
        return self._tick_blink()

    # -- Phases -----------------------------------------------------------

    def _tick_loading(self):
        self._loading_count += 1
        self._progress = self._loading_count / self.loading_ticks
        if self._progress <= 1:
            return self._snapshot()

        on_commit = self._on_commit
        self._on_commit = None
        try:
            pick = on_commit()
        except Exception:
            self._reset()
            raise

        self._opacity = 0.0
        self._fade_count = 0
        self._enter(Phase.FADING_IN)
        return self._snapshot(pick=pick)

    def _tick_fade(self):
        self._fade_count += 1
        opacity = self._fade_count * self.fade_step
        if opacity >= 1:
            self._opacity = 1.0
            self._blink_count = 0
            self._highlighted = False
            self._enter(Phase.BLINKING)
        else:
            self._opacity = opacity
        return self._snapshot()

    def _tick_blink(self):
        self._blink_count += 1
        if self._blink_count >= self.blink_ticks:
            # Settle: fully opaque, no highlight
            self._highlighted = False
            self._opacity = 1.0
            self._enter(Phase.IDLE)
            return self._snapshot(finished=True)
        self._highlighted = not self._highlighted
        return self._snapshot()

    def _enter(self, phase):
        logger.debug("Phase %s -> %s", self._phase.value, phase.value)
        self._phase = phase

    def _snapshot(self, pick=None, finished=False):
        return TickResult(
            phase=self._phase,
            progress=self._progress,
            opacity=self._opacity,
            highlighted=self._highlighted,
            pick=pick,
            finished=finished,
        )
