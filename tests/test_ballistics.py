import pytest

from artillery.ballistics import step_projectile
from artillery.constants import ShotOutcome, GRAVITY, PLAYFIELD_HEIGHT
from artillery.obstacles import Obstacle, ObstacleField
from artillery.tank import Projectile, Tank
from artillery.wind import Wind


def _make_target() -> Tank:
    return Tank(700, 135, 50, "blue")


def test_step_moves_before_applying_gravity():
    p = Projectile(100.0, 300.0, 2.0, -3.0)

    result = step_projectile(p, Wind(), _make_target(), ObstacleField())

    assert result.outcome == ShotOutcome.IN_FLIGHT
    assert not result.resolved
    assert p.x == pytest.approx(102.0)
    assert p.y == pytest.approx(297.0)
    assert p.vy == pytest.approx(-3.0 + GRAVITY)
    assert p.vx == pytest.approx(2.0)


@pytest.mark.parametrize("direction, intensity, expected_x", [
    (1, 1.5, 102.03),
    (-1, 1.5, 101.97),
    (1, 0.0, 102.0),
])
def test_wind_adds_linear_horizontal_drift(direction, intensity, expected_x):
    p = Projectile(100.0, 300.0, 2.0, 0.0)

    step_projectile(p, Wind(direction, intensity), _make_target(), ObstacleField())

    assert p.x == pytest.approx(expected_x)


def test_ground_is_strictly_below_the_playfield():
    on_floor = Projectile(10.0, PLAYFIELD_HEIGHT - 1.0, 0.0, 1.0)
    past_floor = Projectile(10.0, PLAYFIELD_HEIGHT - 1.0, 0.0, 1.5)

    assert step_projectile(on_floor, Wind(), _make_target(), ObstacleField()).outcome == ShotOutcome.IN_FLIGHT
    assert step_projectile(past_floor, Wind(), _make_target(), ObstacleField()).outcome == ShotOutcome.GROUND


def test_tank_edges_do_not_count_as_hits():
    target = _make_target()
    p = Projectile(target.x, target.y + 10, 0.0, 0.0)

    result = step_projectile(p, Wind(), target, ObstacleField())

    assert result.outcome == ShotOutcome.IN_FLIGHT
    assert target.health == 100


def test_tank_check_runs_before_obstacle_check():
    target = _make_target()
    covering = Obstacle(target.x - 5, target.y - 5, 60, 30)
    field = ObstacleField([covering])
    p = Projectile(target.x + 10, target.y + 10, 0.0, 0.0)

    result = step_projectile(p, Wind(), target, field)

    assert result.outcome == ShotOutcome.TANK_HIT
    assert len(field) == 1
    assert target.health == 75


def test_health_is_not_clamped_on_fatal_hit():
    target = _make_target()
    target.health = 10
    p = Projectile(target.x + 10, target.y + 10, 0.0, 0.0)

    result = step_projectile(p, Wind(), target, ObstacleField())

    assert result.outcome == ShotOutcome.FATAL_HIT
    assert target.health == -15
    assert not target.alive


def test_only_one_obstacle_removed_per_tick():
    a = Obstacle(100, 100, 50, 50)
    b = Obstacle(100, 100, 50, 50)  # equal but distinct rectangle
    field = ObstacleField([a, b])
    p = Projectile(120, 120, 0.0, 0.0)

    result = step_projectile(p, Wind(), _make_target(), field)

    assert result.outcome == ShotOutcome.OBSTACLE_HIT
    assert result.obstacle is a
    assert len(field) == 1
    assert field.obstacles[0] is b


def test_shot_result_serializes_obstacle():
    field = ObstacleField([Obstacle(100, 100, 50, 50)])
    p = Projectile(120, 120, 0.0, 0.0)

    data = step_projectile(p, Wind(), _make_target(), field).to_dict()

    assert data["outcome"] == "obstacle_hit"
    assert data["obstacle"] == {"x": 100, "y": 100, "width": 50, "height": 50}
