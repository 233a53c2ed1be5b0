"""Phase transitions for a HIIT session.

Phases
------
IDLE         Nothing scheduled.
GET_READY    Countdown before a set (fixed 3 s before set 1, the
             between-sets rest before every later set).
EXERCISING   Working on ``exercises[current_exercise_index]``.
RESTING      Short rest; the index already points at the next exercise.
FINISHED     Last exercise of the last set is done.

Transitions (only evaluated when the clock hits zero)
-----------------------------------------------------
GET_READY  → EXERCISING
EXERCISING → RESTING      more exercises left in this set
EXERCISING → GET_READY    set done, more sets left
EXERCISING → FINISHED     last exercise of the last set
RESTING    → EXERCISING
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .config import Configuration


class Phase(Enum):
    IDLE = "idle"
    GET_READY = "get_ready"
    EXERCISING = "exercising"
    RESTING = "resting"
    FINISHED = "finished"


GET_READY_MS = 3000

TERMINAL_PHASES = (Phase.IDLE, Phase.FINISHED)


@dataclass(frozen=True)
class SessionState:
    """Observable position within a run."""

    phase: Phase = Phase.IDLE
    remaining_ms: int = 0
    current_set: int = 1
    current_exercise_index: int = 0
    running: bool = False

    @property
    def is_terminal(self) -> bool:
        return self.phase in TERMINAL_PHASES


def _finished(state: SessionState) -> SessionState:
    return replace(
        state,
        phase=Phase.FINISHED,
        remaining_ms=0,
        current_set=1,
        current_exercise_index=0,
    )


def next_phase(state: SessionState, config: Configuration) -> SessionState:
    """Return the state that follows *state* once its countdown expires.

    Pure: *state* and *config* are left untouched.  ``running`` is copied
    through unchanged; stopping the clock is the caller's business.
    """
    phase = state.phase

    if phase == Phase.GET_READY:
        if config.set_count == 0:
            return _finished(state)
        return replace(
            state,
            phase=Phase.EXERCISING,
            remaining_ms=config.exercise_duration_ms,
        )

    if phase == Phase.EXERCISING:
        # An empty list never satisfies this, so the set just completes.
        if state.current_exercise_index + 1 < len(config.exercises):
            return replace(
                state,
                phase=Phase.RESTING,
                remaining_ms=config.rest_between_exercises_ms,
                current_exercise_index=state.current_exercise_index + 1,
            )
        if state.current_set < config.set_count:
            return replace(
                state,
                phase=Phase.GET_READY,
                remaining_ms=config.rest_between_sets_ms,
                current_set=state.current_set + 1,
                current_exercise_index=0,
            )
        return _finished(state)

    if phase == Phase.RESTING:
        return replace(
            state,
            phase=Phase.EXERCISING,
            remaining_ms=config.exercise_duration_ms,
        )

    # IDLE / FINISHED have nowhere to go.
    return _finished(state)
