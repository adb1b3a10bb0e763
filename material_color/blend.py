# pyright: strict
from .hct import Hct
from .math_utils import difference_degrees, rotation_direction, sanitize_degrees

'''Functions for blending in HCT.'''

_MAX_ROTATION = 15.0


def harmonized_hue(from_hue: float, to_hue: float) -> float:
  '''
  Rotates from_hue towards to_hue along the shorter arc, by half their distance and at most 15
  degrees.
  '''
  rotation = min(difference_degrees(from_hue, to_hue) * 0.5, _MAX_ROTATION)
  return sanitize_degrees(from_hue + rotation * rotation_direction(from_hue, to_hue))


def harmonize(design_color: int, source_color: int) -> int:
  '''
  Blend the design color's HCT hue towards the key color's HCT hue, in a way that leaves the
  original color recognizable and recognizably shifted towards the key color.

  :param design_color: ARGB representation of an arbitrary color.
  :param source_color: ARGB representation of the main theme color.
  :return: The design color with a hue shifted towards the system's color, a slightly
           warmer/cooler variant of the design color's hue.
  '''
  from_hct = Hct.from_argb(design_color)
  to_hct = Hct.from_argb(source_color)
  return int(from_hct.with_hue(harmonized_hue(from_hct.hue, to_hct.hue)))
