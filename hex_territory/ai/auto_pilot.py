"""Paced turn driver for automated players.

An automated player visibly "dials in" its direction before committing:

    THINKING(n) -> ALIGNING(target) -> CONFIRMING(n) -> DONE

Each scheduler tick advances the machine by one step. The pilot cancels its
own repeating timer right before it commits the turn, so exactly one commit
happens per pilot.
"""

import logging
from typing import Callable, Optional

from ..core.enums import Direction, PilotPhase, Rotation
from ..core.exceptions import GameStateError
from ..core.constants import DEFAULT_AI_THINK_TICKS, DEFAULT_AI_CONFIRM_TICKS, DEFAULT_AI_TICK_INTERVAL_MS
from ..utils.validation import Validator
from ..game.direction_selector import DirectionSelector
from ..game.scheduler import Scheduler


class AutoPilot:
    """Rotates a selector clockwise onto `target`, waits, then calls `on_commit`."""

    def __init__(self, selector: DirectionSelector, target: Direction,
                 on_commit: Callable[[], None],
                 think_ticks: int = DEFAULT_AI_THINK_TICKS,
                 confirm_ticks: int = DEFAULT_AI_CONFIRM_TICKS):
        Validator.validate_enum(target, Direction, "target")
        Validator.validate_non_negative(think_ticks, "think_ticks")
        Validator.validate_non_negative(confirm_ticks, "confirm_ticks")

        self.selector = selector
        self.target = target
        self.on_commit = on_commit
        self.think_remaining = think_ticks
        self.confirm_remaining = confirm_ticks
        self.phase = PilotPhase.THINKING

        self._scheduler: Optional[Scheduler] = None
        self._handle: Optional[int] = None

    @property
    def is_done(self) -> bool:
        return self.phase == PilotPhase.DONE

    def start(self, scheduler: Scheduler, interval_ms: int = DEFAULT_AI_TICK_INTERVAL_MS) -> None:
        """Register `tick` as a repeating callback."""
        if self._handle is not None:
            raise GameStateError("AutoPilot already started")
        self._scheduler = scheduler
        self._handle = scheduler.schedule_repeating(self.tick, interval_ms)

    def tick(self) -> PilotPhase:
        """Advance one step."""
        if self.phase == PilotPhase.DONE:
            return self.phase

        if self.phase == PilotPhase.THINKING and self.think_remaining > 0:
            self.think_remaining -= 1
        elif self.selector.direction != self.target:
            self.phase = PilotPhase.ALIGNING
            self.selector.rotate(Rotation.CW)
        elif self.confirm_remaining > 0:
            self.phase = PilotPhase.CONFIRMING
            self.confirm_remaining -= 1
        else:
            self.phase = PilotPhase.DONE
            self._stop()
            logging.debug(f"{self.selector.player.display_name} commits {self.target.value}")
            self.on_commit()

        return self.phase

    def cancel(self) -> None:
        """Stop without committing."""
        self.phase = PilotPhase.DONE
        self._stop()

    def _stop(self) -> None:
        if self._scheduler is not None and self._handle is not None:
            self._scheduler.cancel(self._handle)
        self._handle = None
