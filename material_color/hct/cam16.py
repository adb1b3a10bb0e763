# pyright: strict
import math
from dataclasses import dataclass
from typing import Optional

from ..color_utils import argb_from_xyz, xyz_from_argb
from ..math_utils import Vec3f, matrix_multiply, sanitize_degrees, signum
from .viewing_conditions import CAM16RGB_TO_XYZ, XYZ_TO_CAM16RGB, ViewingConditions

'''
CAM16, a color appearance model. Colors are not just defined by their hexcode, but rather, a hex
code and viewing conditions.

CAM16 instances also have coordinates in the CAM16-UCS space, called J*, a*, b*, or jstar, astar,
bstar in code. CAM16-UCS is included in the CAM16 specification, and should be used when measuring
distances between colors.
'''


def _adapted(component: float, fl: float) -> float:
  '''Post-adaptation compression of a single cone response, keeping its sign.'''
  af = (fl * abs(component) / 100.0) ** 0.42
  return signum(component) * 400.0 * af / (af + 27.13)


def _unadapted(component: float, fl: float) -> float:
  base = max(0.0, 27.13 * abs(component) / (400.0 - abs(component)))
  return signum(component) * (100.0 / fl) * base ** (1.0 / 0.42)


def _ucs(j: float, m: float, hue: float) -> Vec3f:
  hue_radians = math.radians(hue)
  jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
  mstar = (1.0 / 0.0228) * math.log1p(0.0228 * m)
  return jstar, mstar * math.cos(hue_radians), mstar * math.sin(hue_radians)


@dataclass(frozen=True)
class Cam16:
  '''
  All of the CAM16 dimensions can be calculated from 3 of the dimensions, in the following
  combinations:
    -  {j or q} and {c, m, or s} and hue
    - jstar, astar, bstar
  Prefer the static constructors, the plain constructor exists for them to fill in every field.

  :param hue: in degrees, 0 <= hue < 360
  :param chroma: informally, colorfulness / color intensity. like saturation in HSL, except
                 perceptually accurate.
  :param j: lightness
  :param q: brightness, ratio of lightness to the white point's lightness
  :param m: colorfulness
  :param s: saturation, ratio of chroma to the white point's chroma
  :param jstar: CAM16-UCS J coordinate
  :param astar: CAM16-UCS a coordinate
  :param bstar: CAM16-UCS b coordinate
  '''
  hue: float
  chroma: float
  j: float
  q: float
  m: float
  s: float
  jstar: float
  astar: float
  bstar: float

  def distance(self, other: "Cam16") -> float:
    '''Perceptual distance in CAM16-UCS, with the 1.41 * dE'^0.63 rescaling.'''
    d_j = self.jstar - other.jstar
    d_a = self.astar - other.astar
    d_b = self.bstar - other.bstar
    return 1.41 * math.sqrt(d_j * d_j + d_a * d_a + d_b * d_b) ** 0.63

  @staticmethod
  def from_argb(argb: int, viewing_conditions: Optional[ViewingConditions] = None) -> "Cam16":
    '''
    :param argb: ARGB representation of a color.
    :param viewing_conditions: where the color was observed, standard sRGB viewing if omitted.
    '''
    vc = viewing_conditions or ViewingConditions.standard()
    r_c, g_c, b_c = matrix_multiply(xyz_from_argb(argb), XYZ_TO_CAM16RGB)
    r_a = _adapted(vc.rgb_d[0] * r_c, vc.fl)
    g_a = _adapted(vc.rgb_d[1] * g_c, vc.fl)
    b_a = _adapted(vc.rgb_d[2] * b_c, vc.fl)

    # opponent axes, redness-greenness and yellowness-blueness
    a = (11.0 * r_a - 12.0 * g_a + b_a) / 11.0
    b = (r_a + g_a - 2.0 * b_a) / 9.0
    u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
    p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0
    hue = sanitize_degrees(math.degrees(math.atan2(b, a)))

    ac = p2 * vc.nbb
    j = 100.0 * (ac / vc.aw) ** (vc.c * vc.z)
    q = (4.0 / vc.c) * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root
    hue_prime = hue + 360.0 if hue < 20.14 else hue
    e_hue = 0.25 * (math.cos(math.radians(hue_prime) + 2.0) + 3.8)
    p1 = (50000.0 / 13.0) * e_hue * vc.nc * vc.ncb
    t = p1 * math.hypot(a, b) / (u + 0.305)
    alpha = t ** 0.9 * (1.64 - 0.29 ** vc.n) ** 0.73
    c = alpha * math.sqrt(j / 100.0)
    m = c * vc.fl_root
    s = 50.0 * math.sqrt(alpha * vc.c / (vc.aw + 4.0))
    return Cam16(hue, c, j, q, m, s, *_ucs(j, m, hue))

  @staticmethod
  def from_jch(j: float, c: float, h: float, viewing_conditions: Optional[ViewingConditions] = None) -> "Cam16":
    '''
    :param j: CAM16 lightness
    :param c: CAM16 chroma
    :param h: CAM16 hue
    '''
    vc = viewing_conditions or ViewingConditions.standard()
    q = (4.0 / vc.c) * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root
    m = c * vc.fl_root
    alpha = 0.0 if j == 0.0 else c / math.sqrt(j / 100.0)
    s = 50.0 * math.sqrt(alpha * vc.c / (vc.aw + 4.0))
    return Cam16(h, c, j, q, m, s, *_ucs(j, m, h))

  @staticmethod
  def from_ucs(jstar: float, astar: float, bstar: float, viewing_conditions: Optional[ViewingConditions] = None) -> "Cam16":
    '''Inverse of the CAM16-UCS projection.'''
    vc = viewing_conditions or ViewingConditions.standard()
    m = math.expm1(math.hypot(astar, bstar) * 0.0228) / 0.0228
    c = m / vc.fl_root
    h = sanitize_degrees(math.degrees(math.atan2(bstar, astar)))
    j = jstar / (1.0 - (jstar - 100.0) * 0.007)
    return Cam16.from_jch(j, c, h, vc)

  def __int__(self) -> int:
    return self.to_argb()

  def to_argb(self, viewing_conditions: Optional[ViewingConditions] = None) -> int:
    '''
    Renders the color. Attributes outside what a real color can have still produce some color,
    usually one with a different hue and chroma.

    :param viewing_conditions: where the color will be viewed, standard sRGB viewing if omitted.
    '''
    vc = viewing_conditions or ViewingConditions.standard()
    alpha = 0.0 if self.chroma == 0.0 or self.j == 0.0 else self.chroma / math.sqrt(self.j / 100.0)
    t = (alpha / (1.64 - 0.29 ** vc.n) ** 0.73) ** (1.0 / 0.9)
    h_rad = math.radians(self.hue)
    e_hue = 0.25 * (math.cos(h_rad + 2.0) + 3.8)
    ac = vc.aw * (self.j / 100.0) ** (1.0 / vc.c / vc.z)
    p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
    p2 = ac / vc.nbb
    h_sin = math.sin(h_rad)
    h_cos = math.cos(h_rad)
    gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
    a = gamma * h_cos
    b = gamma * h_sin
    r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
    g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
    b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0
    cone = (
      _unadapted(r_a, vc.fl) / vc.rgb_d[0],
      _unadapted(g_a, vc.fl) / vc.rgb_d[1],
      _unadapted(b_a, vc.fl) / vc.rgb_d[2],
    )
    return argb_from_xyz(*matrix_multiply(cone, CAM16RGB_TO_XYZ))
