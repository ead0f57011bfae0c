"""Tests for the Recorder and comparison mode."""

import pytest

from engine import Recorder, compare
from errors import InvalidInput


def _recorded(key: str, values):
    rec = Recorder()
    rec.start(key, values)
    rec.run_to_completion()
    return rec


def test_metrics_for_bubble() -> None:
    rec = Recorder()
    rec.start("bubble", [3, 2, 1])
    m = rec.run_to_completion()
    assert rec.metrics is m
    assert m.algo_label == "Bubble Sort"
    assert m.size == 3
    assert m.comparisons == 3
    assert m.swaps == 3
    assert m.total_steps == 7
    assert m.sorted_ok
    assert m.stable
    assert m.memory_bytes > 0
    assert rec.sequence.values() == [1, 2, 3]


def test_recorder_does_not_touch_caller_values() -> None:
    values = [5, 3, 8, 1]
    rec = _recorded("quick", values)
    assert values == [5, 3, 8, 1]

    exported = rec.export()
    assert exported["algo_key"] == "quick"
    assert [it["value"] for it in exported["items"]] == [5, 3, 8, 1]
    assert len(exported["steps"]) == len(exported["frames"]) == rec.metrics.total_steps
    assert exported["steps"][-1]["kind"] == "done"


def test_run_before_start_is_an_error() -> None:
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_unknown_algorithm() -> None:
    with pytest.raises(InvalidInput):
        Recorder().start("bogo", [1, 2])


def test_compare_picks_lower_counts_and_ties() -> None:
    values = [2, 1]
    result = compare(_recorded("bubble", values), _recorded("selection", values))
    assert result.winner_comparisons == "tie"
    assert result.winner_swaps == "tie"

    values = [8, 7, 6, 5, 4, 3, 2, 1]
    result = compare(_recorded("bubble", values), _recorded("merge", values))
    assert result.winner_comparisons == "Merge Sort"
    card = result.to_dict()
    assert card["left"]["algo_key"] == "bubble"
    assert card["right"]["algo_key"] == "merge"
