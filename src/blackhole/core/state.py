"""
State machine for a play session.

States:
    LOADING: Sprites are still loading, only the loading prompt is shown
    READY: Player stands on the start platform waiting for a direction key
    RUNNING: Simulation advancing, spawn timers active
    PAUSED: Window hidden, spawn timers cancelled, elapsed time frozen
    GAME_OVER: Terminal; only a full reset leaves it
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class State(Enum):
    """Session states."""
    LOADING = auto()
    READY = auto()
    RUNNING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


Listener = Callable[[State, State], None]


class StateMachine:
    """
    Manages session state and transitions.

    GAME_OVER has no outgoing transition; reset() is the only way back
    to the start of a session.
    """

    VALID_TRANSITIONS: list[tuple[State, State]] = [
        (State.LOADING, State.READY),
        (State.READY, State.RUNNING),
        (State.RUNNING, State.PAUSED),
        (State.RUNNING, State.GAME_OVER),
        (State.PAUSED, State.RUNNING),
    ]

    def __init__(self, initial_state: State = State.LOADING) -> None:
        self._initial_state = initial_state
        self._state = initial_state
        self._listeners: list[Listener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"StateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> State:
        """Get current state."""
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == State.RUNNING

    @property
    def has_started(self) -> bool:
        """True once the player started moving in this session."""
        return self._state in (State.RUNNING, State.PAUSED, State.GAME_OVER)

    @property
    def is_over(self) -> bool:
        return self._state == State.GAME_OVER

    def can_transition(self, to_state: State) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: State) -> bool:
        """
        Attempt to transition to a new state.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state
        logger.info(f"State transition: {old_state.name} -> {to_state.name}")
        self._notify(old_state, to_state)
        return True

    def add_listener(self, callback: Listener) -> None:
        """Add a state change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        """Remove a state change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def reset(self, state: State | None = None) -> None:
        """Reset to the initial state (or the given one)."""
        old_state = self._state
        self._state = state or self._initial_state
        self._notify(old_state, self._state)
        logger.info(f"StateMachine reset to {self._state.name}")

    def _notify(self, old_state: State, new_state: State) -> None:
        for listener in self._listeners:
            try:
                listener(old_state, new_state)
            except Exception as e:
                logger.error(f"Error in state listener: {e}")
