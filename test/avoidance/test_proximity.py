from pheeno_ros.avoidance.proximity import (
    ObstacleRule,
    evaluate_proximity,
    ir_sensor_triggered,
)
from pheeno_ros.sensors.sensor_state import IRSnapshot

OBS_LINEAR = 0.2
OBS_ANGULAR = 0.7


class FixedTurn:
    """Always returns the given sign and counts its draws."""

    def __init__(self, sign=1.0):
        self.sign = sign
        self.calls = 0

    def __call__(self, angular):
        self.calls += 1
        return self.sign * angular


def evaluate(ir, range_to_avoid=10.0, turn=None):
    return evaluate_proximity(ir, range_to_avoid, OBS_LINEAR, OBS_ANGULAR, turn or FixedTurn())


def test_center_symmetric_sets_linear_then_turns_right():
    ir = IRSnapshot.from_readings(center=5, right=10, left=10, cright=100, cleft=100, back=100)
    result = evaluate(ir, range_to_avoid=15.0)

    assert result.rule == ObstacleRule.CENTER
    assert result.triggered
    assert result.linear == OBS_LINEAR
    assert result.angular == OBS_ANGULAR


def test_center_random_turn_is_overwritten_by_side_comparison():
    turn = FixedTurn(sign=1.0)
    ir = IRSnapshot.from_readings(center=5, right=12, left=14, cright=100, cleft=100, back=100)
    result = evaluate(ir, turn=turn)

    # random turn picked right, the Right < Left comparison turns left anyway
    assert turn.calls == 1
    assert result.linear == OBS_LINEAR
    assert result.angular == -OBS_ANGULAR


def test_center_both_sides_clear_draws_then_turns_away_from_closer_side():
    turn = FixedTurn(sign=-1.0)
    ir = IRSnapshot.from_readings(center=5, right=50, left=20, cright=100, cleft=100, back=100)
    result = evaluate(ir, turn=turn)

    assert turn.calls == 1
    assert result.linear == OBS_LINEAR
    assert result.angular == OBS_ANGULAR


def test_center_asymmetric_turns_left_without_random_draw():
    turn = FixedTurn()
    ir = IRSnapshot.from_readings(center=5, right=3, left=30, cright=100, cleft=100, back=100)
    result = evaluate(ir, turn=turn)

    assert turn.calls == 0
    assert result.rule == ObstacleRule.CENTER
    assert result.linear is None
    assert result.angular == -OBS_ANGULAR


def test_both_center_sides_use_random_turn():
    ir = IRSnapshot.from_readings(center=100, right=100, left=100, cright=5, cleft=5, back=100)

    assert evaluate(ir, turn=FixedTurn(1.0)).angular == OBS_ANGULAR
    assert evaluate(ir, turn=FixedTurn(-1.0)).angular == -OBS_ANGULAR
    assert evaluate(ir).rule == ObstacleRule.CRIGHT_AND_CLEFT


def test_only_cright_turns_left():
    ir = IRSnapshot.from_readings(center=20, right=20, left=20, cright=5, cleft=20, back=20)
    result = evaluate(ir)

    assert result.rule == ObstacleRule.CRIGHT
    assert result.angular == -OBS_ANGULAR
    assert result.linear is None


def test_only_cleft_turns_right():
    ir = IRSnapshot.from_readings(center=20, right=20, left=20, cright=20, cleft=5, back=20)
    result = evaluate(ir)

    assert result.rule == ObstacleRule.CLEFT
    assert result.angular == OBS_ANGULAR


def test_only_right_turns_left():
    ir = IRSnapshot.from_readings(center=20, right=5, left=20, cright=20, cleft=20, back=20)
    result = evaluate(ir)

    assert result.rule == ObstacleRule.RIGHT
    assert result.angular == -OBS_ANGULAR


def test_only_left_turns_right():
    ir = IRSnapshot.from_readings(center=20, right=20, left=5, cright=20, cleft=20, back=20)
    result = evaluate(ir)

    assert result.rule == ObstacleRule.LEFT
    assert result.angular == OBS_ANGULAR


def test_center_side_sensors_take_priority_over_outer_sensors():
    ir = IRSnapshot.from_readings(center=20, right=5, left=20, cright=20, cleft=5, back=20)
    result = evaluate(ir)

    # CLeft (turn right) wins over Right (turn left)
    assert result.rule == ObstacleRule.CLEFT
    assert result.angular == OBS_ANGULAR


def test_center_takes_priority_over_everything():
    ir = IRSnapshot.from_readings(center=5, right=1, left=9, cright=1, cleft=1, back=1)
    assert evaluate(ir).rule == ObstacleRule.CENTER


def test_nothing_in_range():
    result = evaluate(IRSnapshot.from_readings(100, 100, 100, 100, 100, 100))

    assert result.rule == ObstacleRule.NONE
    assert not result.triggered
    assert result.angular is None
    assert result.linear is None


def test_reading_equal_to_range_is_not_an_obstacle():
    result = evaluate(IRSnapshot.from_readings(10, 10, 10, 10, 10, 10), range_to_avoid=10.0)
    assert result.rule == ObstacleRule.NONE


def test_back_sensor_is_ignored():
    result = evaluate(IRSnapshot.from_readings(100, 100, 100, 100, 100, back=0))
    assert result.rule == ObstacleRule.NONE


def test_unread_sensors_count_as_obstacle_at_zero():
    result = evaluate(IRSnapshot())

    assert result.rule == ObstacleRule.CENTER
    assert result.angular == OBS_ANGULAR


def test_ir_sensor_triggered_needs_more_than_one_sensor():
    two_close = IRSnapshot.from_readings(5, 100, 100, 5, 100, 100)
    one_close = IRSnapshot.from_readings(5, 100, 100, 100, 100, 100)

    assert ir_sensor_triggered(two_close, 10.0)
    assert not ir_sensor_triggered(one_close, 10.0)


def test_ir_sensor_triggered_skips_back_sensor():
    front_and_back = IRSnapshot.from_readings(5, 100, 100, 100, 100, 5)
    assert not ir_sensor_triggered(front_and_back, 10.0)
