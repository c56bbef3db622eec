from __future__ import annotations

import logging

from face_runner.runner import CONFIG, GameSession, Obstacle, ObstacleKind, Phase, PlayerState


def _obstacle(kind: ObstacleKind, x: float) -> Obstacle:
    o = Obstacle.create(kind)
    o.x = x
    return o


def test_initial_phase_does_not_tick():
    s = GameSession()
    assert s.phase is Phase.START
    s.tick()
    assert s.frames == 0
    assert s.player.y == CONFIG.ground_y


def test_start_enters_playing_with_fresh_state():
    s = GameSession()
    s.observe("happy")
    assert s.start() is True
    assert s.phase is Phase.PLAYING
    assert s.score == 0
    assert s.obstacles == []
    assert s.current_label == "neutral"


def test_start_while_playing_is_ignored():
    s = GameSession()
    s.start()
    s.tick()
    player = s.player
    assert s.start() is False
    assert s.player is player
    assert s.frames == 1


def test_offscreen_obstacles_score_without_skipping():
    s = GameSession()
    s.start()
    s.obstacles = [_obstacle(ObstacleKind.LOW, -34.0), _obstacle(ObstacleKind.HIGH, -35.0)]
    s.tick()
    assert s.obstacles == []
    assert s.score == 2


def test_collision_freezes_session(caplog):
    s = GameSession()
    s.start()
    s.score = 3
    s.obstacles = [_obstacle(ObstacleKind.LOW, 105.0), _obstacle(ObstacleKind.HIGH, 500.0)]
    with caplog.at_level(logging.INFO, logger="face_runner.runner.session"):
        s.tick()
    assert s.phase is Phase.GAME_OVER
    assert "game over" in caplog.text

    positions = [o.x for o in s.obstacles]
    frames = s.frames
    s.observe("happy")
    for _ in range(50):
        s.tick()
    assert [o.x for o in s.obstacles] == positions
    assert s.score == 3
    assert s.frames == frames
    assert s.player.state is PlayerState.RUNNING


def test_restart_from_game_over_resets_score():
    s = GameSession()
    s.start()
    s.score = 5
    s.obstacles = [_obstacle(ObstacleKind.LOW, 105.0)]
    s.tick()
    assert s.phase is Phase.GAME_OVER

    assert s.start() is True
    assert s.phase is Phase.PLAYING
    assert s.score == 0
    assert s.obstacles == []
    assert s.player.y == CONFIG.ground_y


def test_label_drives_player_each_tick():
    s = GameSession()
    s.start()
    s.observe("surprised")
    s.tick()
    assert s.player.state is PlayerState.JUMPING
    assert s.player.y < CONFIG.ground_y


def test_ducking_avoids_high_obstacle():
    s = GameSession()
    s.start()
    s.observe("sad")
    s.tick()
    assert s.player.height == CONFIG.duck_height

    s.obstacles = [_obstacle(ObstacleKind.HIGH, 100.0)]
    for _ in range(10):
        s.tick()
    assert s.phase is Phase.PLAYING


def test_standing_still_eventually_loses(seq_random):
    # 0.2: 抽選に当たり、種類は HIGH
    s = GameSession(rng=seq_random([0.2]))
    s.start()
    for _ in range(300):
        s.tick()
    assert s.phase is Phase.GAME_OVER
    assert s.score == 0


def test_jumping_over_low_obstacle_scores(seq_random):
    # 0.1 で抽選に当たり、0.9 で LOW を選ぶ
    s = GameSession(rng=seq_random([0.1, 0.9]))
    s.start()
    for _ in range(250):
        near = any(o.x < 200 for o in s.obstacles)
        s.observe("happy" if near else "neutral")
        s.tick()
        assert s.player.y <= CONFIG.ground_y
    assert s.phase is Phase.PLAYING
    assert s.score == 1


def test_geometry_queries():
    s = GameSession()
    s.start()
    s.obstacles = [_obstacle(ObstacleKind.LOW, 400.0)]
    assert s.player_box() == s.player.box()
    assert [b.left for b in s.obstacle_boxes()] == [400.0]
