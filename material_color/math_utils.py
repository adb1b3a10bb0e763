# pyright: strict
from typing import Literal, Tuple, TypeVar

'''Small numeric helpers shared by the color space and CAM16 code.'''

Vec3f = Tuple[float, float, float]
Mat3x3f = Tuple[Vec3f, Vec3f, Vec3f]
Signum = Literal[-1, 0, 1]
TNumber = TypeVar("TNumber", int, float)


def signum(num: float) -> Signum:
  '''
  The signum function.
  :return: 1 if num > 0, -1 if num < 0, and 0 if num = 0
  '''
  if num < 0:
    return -1
  if num > 0:
    return 1
  return 0


def lerp(start: float, stop: float, amount: float) -> float:
  ''':return: start if amount = 0 and stop if amount = 1'''
  return (1.0 - amount) * start + amount * stop


def clamp(low: TNumber, high: TNumber, value: TNumber) -> TNumber:
  ''':return: value when low <= value <= high, otherwise the nearer bound.'''
  return low if value < low else high if value > high else value


def sanitize_degrees(degrees: TNumber) -> TNumber:
  '''
  Wraps an angle onto the circle.
  :return: a degree measure between 0 (inclusive) and 360 (exclusive), -10 becomes 350.
  '''
  degrees = degrees % 360
  # float modulo can round a tiny negative up to exactly 360
  if degrees >= 360:
    degrees -= 360
  elif degrees < 0:
    degrees += 360
  return degrees


def difference_degrees(a: float, b: float) -> float:
  '''Shortest distance of two points on a circle, in degrees. Always within [0, 180].'''
  return 180.0 - abs(abs(a - b) - 180.0)


def rotation_direction(from_: float, to: float) -> float:
  '''
  Sign of the rotation that travels the shorter arc between two angles.
  :return: 1.0 if increasing from_ reaches to sooner, -1.0 otherwise.
  '''
  increasing = sanitize_degrees(to - from_)
  return 1.0 if increasing <= 180.0 else -1.0


def matrix_multiply(row: Vec3f, matrix: Mat3x3f) -> Vec3f:
  '''Multiplies a 1x3 row vector with a 3x3 matrix.'''
  return (
    row[0] * matrix[0][0] + row[1] * matrix[0][1] + row[2] * matrix[0][2],
    row[0] * matrix[1][0] + row[1] * matrix[1][1] + row[2] * matrix[1][2],
    row[0] * matrix[2][0] + row[1] * matrix[2][1] + row[2] * matrix[2][2],
  )
