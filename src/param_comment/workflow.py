"""A small finite state machine driven by an explicit transition table."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Generic, Mapping, TypeVar

log = logging.getLogger(__name__)

S = TypeVar("S", bound=Enum)
E = TypeVar("E", bound=Enum)


class Workflow(Generic[S, E]):
    """State machine over ``(state, event) -> next state`` pairs.

    Handlers run before the state changes, so a handler that raises leaves
    the machine where it was. A pair missing from the table is the only
    source of "invalid for state" failures: ``on_invalid`` builds the
    exception that ``fire`` raises.

    Example:
        workflow = Workflow(
            State,
            Event,
            {(State.START, Event.GO): State.DONE},
            initial=State.START,
            on_invalid=lambda event, state: ValueError(state.value),
            handlers={Event.GO: record},
        )
        workflow.fire(Event.GO, token)
    """

    def __init__(
        self,
        states: type[S],
        events: type[E],
        transitions: Mapping[tuple[S, E], S],
        initial: S,
        on_invalid: Callable[[E, S], Exception],
        handlers: Mapping[E, Callable[..., Any]] | None = None,
    ) -> None:
        handlers = dict(handlers or {})
        for (state, event), target in transitions.items():
            if not isinstance(state, states) or not isinstance(target, states):
                raise ValueError(
                    f"Unknown state in transition ({state}, {event}) -> {target}"
                )
            if not isinstance(event, events):
                raise ValueError(f"Unknown event in transition ({state}, {event})")
        fired = {event for _, event in transitions}
        unused = [event.name for event in events if event not in fired]
        if unused:
            raise ValueError(f"Events without transitions: {', '.join(unused)}")
        for event in handlers:
            if not isinstance(event, events):
                raise ValueError(f"Handler for unknown event {event}")
        if not isinstance(initial, states):
            raise ValueError(f"Unknown initial state {initial}")

        self._transitions = dict(transitions)
        self._handlers = handlers
        self._on_invalid = on_invalid
        self._initial = initial
        self.current: S = initial

    def fire(self, event: E, *args: Any) -> S:
        """Run ``event``'s handler with ``args`` and move to the next state."""
        target = self._transitions.get((self.current, event))
        if target is None:
            raise self._on_invalid(event, self.current)

        handler = self._handlers.get(event)
        if handler is not None:
            handler(*args)

        log.debug("%s: %s -> %s", event.name, self.current.value, target.value)
        self.current = target
        return target

    def restore(self, state: S | None = None) -> None:
        """Jump to ``state`` (the initial state by default) without firing anything."""
        self.current = self._initial if state is None else state
