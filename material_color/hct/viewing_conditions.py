# pyright: strict
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from ..color_utils import WHITE_POINT_D65, y_from_lstar
from ..math_utils import Mat3x3f, Vec3f, clamp, lerp, matrix_multiply

XYZ_TO_CAM16RGB: Mat3x3f = (
  (0.401288, 0.650173, -0.051461),
  (-0.250268, 1.204414, 0.045854),
  (-0.002079, 0.048952, 0.953127),
)
CAM16RGB_TO_XYZ: Mat3x3f = (
  (1.86206786, -1.01125463, 0.14918677),
  (0.38752654, 0.62144744, -0.00897398),
  (-0.01584150, -0.03412294, 1.04996444),
)


def default_adapting_luminance() -> float:
  '''Roughly 200 lux, a typical room, expressed in cd/m^2 against a mid gray background.'''
  return (200.0 / math.pi) * y_from_lstar(50.0) / 100.0


@dataclass(frozen=True)
class ViewingConditions:
  '''
  In traditional color spaces, a color can be identified solely by the observer's measurement of
  the color. Color appearance models such as CAM16 also use information about the environment where
  the color was observed, known as the viewing conditions.

  For example, white under the traditional assumption of a midday sun white point is accurately
  measured as a slightly chromatic blue by CAM16. (roughly, hue 203, chroma 3, lightness 100)

  The derived fields are the parts of the CAM16 conversion that depend only on the environment.
  Their names are the usual shorthand from the CAM16 literature, see Fairchild's Color Appearance
  Models for a full account.
  '''

  white_point: Vec3f
  adapting_luminance: float
  background_lstar: float
  surround: float
  discounting_illuminant: bool

  n: float
  aw: float
  nbb: float
  ncb: float
  c: float
  nc: float
  rgb_d: Vec3f
  fl: float
  fl_root: float
  z: float

  @staticmethod
  def make(
    white_point: Vec3f = WHITE_POINT_D65,
    adapting_luminance: Optional[float] = None,
    background_lstar: float = 50.0,
    surround: float = 2.0,
    discounting_illuminant: bool = False,
  ) -> "ViewingConditions":
    '''
    Create ViewingConditions from a simple, physically relevant, set of parameters.

    :param white_point: White point in XYZ. default = D65, or sunny day afternoon
    :param adapting_luminance: Luminance of the adapting field, lux multiplied by 0.0586.
                               None or a non-positive value selects roughly 200 lux.
    :param background_lstar: L* of the area surrounding the color, raised to at least 30.
    :param surround: 0 is pitch dark like a movie theater, 1 is a dim room, 2 means the color and
                     its surroundings are lit alike. Must lie within [0, 2].
    :param discounting_illuminant: Whether the eye accounts for the tint of the ambient lighting.
                                   Displays are self-luminous, so this defaults to False.
    :raises ValueError: surround is outside [0, 2], or the white point has a non-positive Y or
                        cone response
    '''
    if not 0.0 <= surround <= 2.0:
      raise ValueError(f"surround={surround} is outside valid range [0, 2]")
    if adapting_luminance is None or adapting_luminance <= 0.0:
      adapting_luminance = default_adapting_luminance()
    background_lstar = max(30.0, background_lstar)
    if white_point[1] <= 0.0:
      raise ValueError(f"white point {white_point} must have a positive Y")

    rgb_w = matrix_multiply(white_point, XYZ_TO_CAM16RGB)
    if min(rgb_w) <= 0.0:
      raise ValueError(f"white point {white_point} has a non-positive cone response {rgb_w}")
    f = 0.8 + surround / 10.0
    if f >= 0.9:
      c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
    else:
      c = lerp(0.525, 0.59, (f - 0.8) * 10.0)
    if discounting_illuminant:
      d = 1.0
    else:
      d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
    d = clamp(0.0, 1.0, d)
    # 100.0 rather than the white point Y, see Fairchild 3rd edition
    rgb_d = (
      d * (100.0 / rgb_w[0]) + 1.0 - d,
      d * (100.0 / rgb_w[1]) + 1.0 - d,
      d * (100.0 / rgb_w[2]) + 1.0 - d,
    )

    k = 1.0 / (5.0 * adapting_luminance + 1.0)
    k4 = k * k * k * k
    k4f = 1.0 - k4
    fl = k4 * adapting_luminance + 0.1 * k4f * k4f * (5.0 * adapting_luminance) ** (1.0 / 3.0)
    n = y_from_lstar(background_lstar) / white_point[1]
    # 1.48, not the 1.58 misprinted in Schlomer 2018
    z = 1.48 + math.sqrt(n)
    nbb = 0.725 / n ** 0.2

    rgb_a = [0.0, 0.0, 0.0]
    for i in range(3):
      factor = (fl * rgb_d[i] * rgb_w[i] / 100.0) ** 0.42
      rgb_a[i] = 400.0 * factor / (factor + 27.13)
    aw = (2.0 * rgb_a[0] + rgb_a[1] + 0.05 * rgb_a[2]) * nbb

    return ViewingConditions(
      white_point, adapting_luminance, background_lstar, surround, discounting_illuminant,
      n, aw, nbb, nbb, c, f, rgb_d, fl, fl ** 0.25, z,
    )

  @staticmethod
  def standard() -> "ViewingConditions":
    '''sRGB-like viewing conditions, built on first use and shared afterwards.'''
    return _standard()


@lru_cache(maxsize=None)
def _standard() -> ViewingConditions:
  return ViewingConditions.make()
