'''Tests for the scalar helpers in material_color.math_utils.'''

import pytest

from material_color.math_utils import (
  clamp,
  difference_degrees,
  lerp,
  matrix_multiply,
  rotation_direction,
  sanitize_degrees,
  signum,
)


class TestSignum:
  @pytest.mark.parametrize("num, expected", [(-3.5, -1), (0.0, 0), (0.001, 1)])
  def test_values(self, num: float, expected: int):
    assert signum(num) == expected


class TestLerp:
  def test_endpoints(self):
    assert lerp(2.0, 6.0, 0.0) == 2.0
    assert lerp(2.0, 6.0, 1.0) == 6.0

  def test_midpoint(self):
    assert lerp(2.0, 6.0, 0.5) == pytest.approx(4.0)


class TestClamp:
  def test_inside_and_outside(self):
    assert clamp(0, 255, 12) == 12
    assert clamp(0, 255, -4) == 0
    assert clamp(0.0, 100.0, 150.0) == 100.0


class TestSanitizeDegrees:
  @pytest.mark.parametrize("degrees, expected", [
    (0.0, 0.0),
    (360.0, 0.0),
    (-10.0, 350.0),
    (725.5, 5.5),
    (-1e-15, 0.0),
  ])
  def test_float(self, degrees: float, expected: float):
    result = sanitize_degrees(degrees)
    assert 0.0 <= result < 360.0
    assert result == pytest.approx(expected, abs=1e-9)

  def test_int(self):
    assert sanitize_degrees(-90) == 270
    assert sanitize_degrees(720) == 0


class TestDifferenceDegrees:
  @pytest.mark.parametrize("a, b, expected", [
    (10.0, 350.0, 20.0),
    (350.0, 10.0, 20.0),
    (0.0, 180.0, 180.0),
    (30.0, 300.0, 90.0),
    (45.0, 45.0, 0.0),
  ])
  def test_shortest_arc(self, a: float, b: float, expected: float):
    assert difference_degrees(a, b) == pytest.approx(expected)


class TestRotationDirection:
  def test_increasing_is_shorter(self):
    assert rotation_direction(10.0, 100.0) == 1.0
    assert rotation_direction(350.0, 10.0) == 1.0

  def test_decreasing_is_shorter(self):
    assert rotation_direction(100.0, 10.0) == -1.0
    assert rotation_direction(30.0, 300.0) == -1.0


class TestMatrixMultiply:
  def test_identity(self):
    identity = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
    assert matrix_multiply((1.0, 2.0, 3.0), identity) == (1.0, 2.0, 3.0)

  def test_rows_are_dotted(self):
    matrix = ((1.0, 2.0, 3.0), (0.0, 1.0, 0.0), (2.0, 0.0, 1.0))
    assert matrix_multiply((1.0, 1.0, 1.0), matrix) == (6.0, 1.0, 3.0)
