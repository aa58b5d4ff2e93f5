"""
Canonical workflow types (``pharmacy_kernel.domain.workflow``).

Responsibility
--------------
Pure value objects for document lifecycles.  A module declares its state
machine once as a ``Workflow`` and asks it which transition (if any) an
action triggers from the current state.

Invariants enforced
-------------------
* Transitions reference only states in ``Workflow.states``.
* ``initial_state`` is a member of ``states``.
* Terminal states are members of ``states`` with no outgoing transitions.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Guard:
    """A condition that must hold before a transition fires.

    Descriptive only; the owning aggregate evaluates it.
    """
    name: str
    description: str


@dataclass(frozen=True)
class Transition:
    """A valid state transition in a workflow."""
    from_state: str
    to_state: str
    action: str
    guard: Guard | None = None


@dataclass(frozen=True)
class Workflow:
    """A state machine definition for a document lifecycle.

    ``terminal_states`` are states with no outgoing transitions.
    """
    name: str
    description: str
    initial_state: str
    states: tuple[str, ...]
    transitions: tuple[Transition, ...]
    terminal_states: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.initial_state not in self.states:
            raise ValueError(
                f"Workflow {self.name}: initial state '{self.initial_state}' "
                f"not in states {self.states}"
            )
        for t in self.transitions:
            if t.from_state not in self.states or t.to_state not in self.states:
                raise ValueError(
                    f"Workflow {self.name}: transition {t.action} "
                    f"({t.from_state} -> {t.to_state}) references an unknown state"
                )
        for state in self.terminal_states:
            if state not in self.states:
                raise ValueError(
                    f"Workflow {self.name}: terminal state '{state}' not in states"
                )
            if self.actions_from(state):
                raise ValueError(
                    f"Workflow {self.name}: terminal state '{state}' has outgoing transitions"
                )

    def transition_for(self, from_state: str, action: str) -> Transition | None:
        """The transition ``action`` triggers from ``from_state``, or None."""
        for t in self.transitions:
            if t.from_state == from_state and t.action == action:
                return t
        return None

    def actions_from(self, state: str) -> tuple[str, ...]:
        """Actions available from ``state``, in declaration order."""
        return tuple(t.action for t in self.transitions if t.from_state == state)
