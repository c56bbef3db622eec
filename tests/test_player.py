from __future__ import annotations

import pytest

from face_runner.runner import CONFIG, Player, PlayerState

GROUND = CONFIG.ground_y


def test_initial_state():
    p = Player()
    assert p.y == GROUND
    assert p.vy == 0
    assert p.state is PlayerState.RUNNING
    assert p.height == CONFIG.normal_height
    assert p.is_on_ground()


def test_happy_label_jumps_from_ground():
    p = Player()
    p.set_state("happy")
    assert p.state is PlayerState.JUMPING
    assert p.vy == CONFIG.jump_impulse

    p.update()
    # 位置を先に動かしてから重力を加える
    assert p.y == pytest.approx(GROUND + CONFIG.jump_impulse)
    assert p.vy == pytest.approx(CONFIG.jump_impulse + CONFIG.gravity)
    assert not p.is_on_ground()


@pytest.mark.parametrize("label", ["happy", "surprised", "sad", "angry", "neutral", "whatever"])
def test_set_state_is_ignored_while_airborne(label):
    p = Player()
    p.set_state("surprised")
    p.update()
    state, vy = p.state, p.vy

    p.set_state(label)
    assert p.state is state
    assert p.vy == vy


def test_jump_does_nothing_in_the_air():
    p = Player()
    p.y = GROUND - 100
    p.jump()
    assert p.vy == 0


def test_never_falls_through_ground_and_lands_running():
    p = Player()
    p.set_state("happy")
    for _ in range(120):
        p.update()
        assert p.y <= GROUND
    assert p.is_on_ground()
    assert p.state is PlayerState.RUNNING


@pytest.mark.parametrize("label", ["sad", "angry", "fearful", "disgusted"])
def test_duck_labels_shrink_player(label):
    p = Player()
    p.set_state(label)
    p.update()
    assert p.state is PlayerState.DUCKING
    assert p.height == CONFIG.duck_height
    box = p.box()
    assert box.top == GROUND - CONFIG.duck_height
    assert box.bottom == GROUND


def test_neutral_after_duck_restores_height():
    p = Player()
    p.set_state("sad")
    p.update()
    p.set_state("neutral")
    p.update()
    assert p.state is PlayerState.RUNNING
    assert p.height == CONFIG.normal_height


def test_unknown_label_runs():
    p = Player()
    p.set_state("contempt")
    assert p.state is PlayerState.RUNNING
