"""Tests for the workflow value objects."""

import pytest

from pharmacy_kernel.domain.workflow import Guard, Transition, Workflow


def _workflow(**overrides) -> Workflow:
    fields = dict(
        name="door",
        description="A door",
        initial_state="closed",
        states=("closed", "open"),
        transitions=(
            Transition("closed", "open", action="open", guard=Guard("unlocked", "Door is unlocked")),
            Transition("open", "closed", action="close"),
        ),
    )
    fields.update(overrides)
    return Workflow(**fields)


class TestWorkflow:

    def test_transition_lookup(self):
        workflow = _workflow()
        transition = workflow.transition_for("closed", "open")
        assert transition.to_state == "open"
        assert transition.guard.name == "unlocked"

    def test_missing_transition_is_none(self):
        assert _workflow().transition_for("open", "open") is None

    def test_actions_from(self):
        assert _workflow().actions_from("closed") == ("open",)

    def test_unknown_initial_state(self):
        with pytest.raises(ValueError):
            _workflow(initial_state="ajar")

    def test_transition_to_unknown_state(self):
        with pytest.raises(ValueError):
            _workflow(transitions=(Transition("closed", "ajar", action="nudge"),))

    def test_value_objects_are_frozen(self):
        transition = Transition("a", "b", action="go")
        with pytest.raises(AttributeError):
            transition.action = "stop"

    def test_terminal_state_with_outgoing_transition(self):
        with pytest.raises(ValueError, match="outgoing"):
            _workflow(terminal_states=("open",))

    def test_unknown_terminal_state(self):
        with pytest.raises(ValueError, match="terminal"):
            _workflow(terminal_states=("gone",))
