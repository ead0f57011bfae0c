"""Tests for the Stepper buffer and review cursor."""

from algorithms import get_algorithm
from algorithms.step import StepKind
from engine import Stepper, StepperState
from sequence import Sequence


def _started(values=(3, 1, 2), key="bubble"):
    seq = Sequence.from_values(list(values))
    stepper = Stepper()
    stepper.start(get_algorithm(key).fn(seq), seq)
    return stepper, seq


def test_start_is_lazy() -> None:
    stepper, seq = _started()
    assert stepper.state is StepperState.READY
    assert stepper.steps == []
    assert stepper.current_step is None
    assert stepper.current_frame == seq.ids()
    assert seq.values() == [3, 1, 2]


def test_next_step_numbers_and_snapshots_frames() -> None:
    stepper, seq = _started()
    assert stepper.next_step()
    assert stepper.current_step.kind is StepKind.COMPARE
    assert stepper.current_step.step_number == 0

    assert stepper.next_step()
    assert stepper.current_step.kind is StepKind.SWAP
    assert stepper.current_frame == seq.ids()
    assert stepper.frames[0] == stepper.initial_frame


def test_cursor_moves_only_the_view() -> None:
    stepper, seq = _started()
    stepper.jump_to_end()
    assert stepper.is_finished
    assert stepper.current_step.is_final
    assert seq.values() == [1, 2, 3]

    assert stepper.goto_step(0)
    assert stepper.current_frame == stepper.frames[0]
    assert seq.values() == [1, 2, 3]
    assert not stepper.prev_step()

    assert stepper.next_step()
    assert stepper.prev_step()
    assert stepper.current_idx == 0
    assert not stepper.goto_step(len(stepper.steps))
    assert not stepper.goto_step(-1)


def test_rewind_then_replay_buffer_without_pulling() -> None:
    stepper, _ = _started(values=(2, 1))
    stepper.jump_to_end()
    total = stepper.total_steps_fetched

    stepper.rewind()
    assert stepper.current_step is None
    assert stepper.current_frame == stepper.initial_frame

    seen = []
    while stepper.next_step():
        seen.append(stepper.current_step.kind)
    assert seen == [StepKind.COMPARE, StepKind.SWAP, StepKind.DONE]
    assert stepper.total_steps_fetched == total


def test_next_step_at_end_finishes() -> None:
    stepper, _ = _started(values=(1,))
    assert stepper.next_step()
    assert stepper.current_step.kind is StepKind.DONE
    assert not stepper.is_finished
    assert not stepper.next_step()
    assert stepper.state is StepperState.FINISHED
    assert stepper.total_steps_fetched == 1


def test_close_stops_the_generator_and_keeps_the_buffer() -> None:
    stepper, seq = _started(values=(3, 2, 1))
    stepper.next_step()
    stepper.next_step()
    stepper.close()
    assert stepper.is_finished
    assert not stepper.next_step()
    assert stepper.total_steps_fetched == 2
    assert stepper.goto_step(0)
    assert seq.values() == [2, 3, 1]
