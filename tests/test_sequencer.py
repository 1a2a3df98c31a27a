"""
Unit tests for AnimationSequencer
"""

import pytest

from sequencer import AnimationSequencer, Phase, SequencerBusy, TickResult
from selection import SelectionState


def run_to_idle(seq, limit=1000):
    """Tick until the sequence finishes, returning every TickResult."""
    results = []
    for _ in range(limit):
        result = seq.tick()
        results.append(result)
        if result.finished:
            return results
    raise AssertionError("sequence did not finish")


def test_invalid_budgets():
    with pytest.raises(ValueError):
        AnimationSequencer(loading_ticks=0)
    with pytest.raises(ValueError):
        AnimationSequencer(fade_step=0)
    with pytest.raises(ValueError):
        AnimationSequencer(blink_ticks=0)


def test_starts_idle_and_idle_tick_is_noop():
    seq = AnimationSequencer()
    assert seq.is_idle
    result = seq.tick()
    assert result.phase is Phase.IDLE
    assert not result.finished
    assert result.pick is None


def test_loading_progress_and_commit_tick():
    commits = []
    seq = AnimationSequencer(loading_ticks=40)
    seq.start(lambda: commits.append("x") or "picked")
    assert seq.phase is Phase.LOADING

    progress = []
    for _ in range(40):
        result = seq.tick()
        assert result.phase is Phase.LOADING
        progress.append(result.progress)
    assert progress == sorted(progress)
    assert all(0 <= p <= 1 for p in progress)
    assert progress[-1] == 1.0
    assert commits == []

    result = seq.tick()  # tick 41
    assert result.progress > 1
    assert result.pick == "picked"
    assert result.phase is Phase.FADING_IN
    assert result.opacity == 0.0
    assert commits == ["x"]


def test_fade_monotonic_and_clamped():
    seq = AnimationSequencer(loading_ticks=1, fade_step=0.3)
    seq.start(lambda: None)
    seq.tick()
    commit = seq.tick()
    assert commit.phase is Phase.FADING_IN

    opacities = [commit.opacity]
    while seq.phase is Phase.FADING_IN:
        opacities.append(seq.tick().opacity)

    assert opacities[0] == 0.0
    assert opacities == sorted(opacities)
    assert opacities[-1] == 1.0
    assert max(opacities) == 1.0
    assert seq.phase is Phase.BLINKING


def test_default_fade_takes_ten_ticks():
    seq = AnimationSequencer(loading_ticks=1, fade_step=0.1)
    seq.start(lambda: None)
    seq.tick()
    seq.tick()
    fade_ticks = 0
    while seq.phase is Phase.FADING_IN:
        seq.tick()
        fade_ticks += 1
    assert fade_ticks == 10
    assert seq.opacity == 1.0


def test_blink_terminates_and_settles():
    seq = AnimationSequencer(loading_ticks=1, fade_step=1.0, blink_ticks=6)
    seq.start(lambda: None)
    seq.tick()
    seq.tick()  # commit
    seq.tick()  # fade to 1
    assert seq.phase is Phase.BLINKING

    blink = [seq.tick() for _ in range(6)]
    assert [r.highlighted for r in blink[:5]] == [True, False, True, False, True]
    assert all(r.phase is Phase.BLINKING for r in blink[:5])

    final = blink[-1]
    assert final.finished
    assert final.phase is Phase.IDLE
    assert final.highlighted is False
    assert final.opacity == 1.0
    assert seq.is_idle


def test_full_sequence_commits_once():
    commits = []
    seq = AnimationSequencer()
    seq.start(lambda: commits.append(1))
    results = run_to_idle(seq)
    assert commits == [1]
    assert sum(1 for r in results if r.finished) == 1
    assert len(results) == 41 + 10 + 6


def test_start_while_running_is_rejected():
    seq = AnimationSequencer()
    seq.start(lambda: None)
    seq.tick()
    with pytest.raises(SequencerBusy):
        seq.start(lambda: None)
    assert seq.phase is Phase.LOADING
    assert seq.progress == 1 / 40


def test_restart_after_finish():
    seq = AnimationSequencer(loading_ticks=2)
    seq.start(lambda: "first")
    run_to_idle(seq)
    seq.start(lambda: "second")
    assert seq.progress == 0.0
    results = run_to_idle(seq)
    assert [r.pick for r in results if r.pick is not None] == ["second"]


def test_stale_source_ignored():
    seq = AnimationSequencer(loading_ticks=2)
    seq.start(lambda: None)
    result = seq.tick(Phase.BLINKING)
    assert result.phase is Phase.LOADING
    assert result.progress == 0.0
    assert seq.tick(Phase.LOADING).progress == 0.5


def test_cancel_skips_commit():
    commits = []
    seq = AnimationSequencer(loading_ticks=3)
    seq.start(lambda: commits.append(1))
    seq.tick()
    assert seq.cancel() is True
    assert seq.is_idle
    for _ in range(10):
        assert seq.tick().pick is None
    assert commits == []
    assert seq.cancel() is False


def test_commit_failure_resets_to_idle():
    def boom():
        raise RuntimeError("commit failed")

    seq = AnimationSequencer(loading_ticks=1)
    seq.start(boom)
    seq.tick()
    with pytest.raises(RuntimeError):
        seq.tick()
    assert seq.is_idle
    seq.start(lambda: None)


def test_end_to_end_with_selection(scripted_random):
    state = SelectionState(["A", "B", "C"], rng=scripted_random([1, 0, 0]))
    seq = AnimationSequencer(loading_ticks=4, fade_step=0.5, blink_ticks=2)
    picks = []

    for _ in range(3):
        ticket = state.request_pick()
        seq.start(lambda t=ticket: state.commit_pick(t))
        results = run_to_idle(seq)
        picks.extend(r.pick for r in results if r.pick is not None)

    assert [(p.name, p.remaining) for p in picks] == [("B", 2), ("A", 1), ("C", 0)]
    assert state.is_exhausted()


def test_tick_result_defaults():
    result = TickResult(phase=Phase.IDLE)
    assert result.progress == 0.0
    assert result.opacity == 0.0
    assert result.highlighted is False
    assert result.pick is None
    assert result.finished is False
