# pyright: strict
import math

from .math_utils import Mat3x3f, Vec3f, clamp, matrix_multiply

'''
Conversions between packed ARGB integers, linear RGB, CIE XYZ, L*a*b* and L*.

Every color is opaque: packing forces alpha to 255. Nothing here raises, out of range inputs only
get clamped at the final 8-bit channel step.
'''

SRGB_TO_XYZ: Mat3x3f = (
  (0.41233895, 0.35762064, 0.18051042),
  (0.2126, 0.7152, 0.0722),
  (0.01932141, 0.11916382, 0.95034478),
)
XYZ_TO_SRGB: Mat3x3f = (
  (3.2413774792388685, -1.5376652402851851, -0.49885366846268053),
  (-0.9691452513005321, 1.8758853451067872, 0.04156585616912061),
  (0.05562093689691305, -0.20395524564742123, 1.0571799111220335),
)
WHITE_POINT_D65: Vec3f = (95.047, 100.0, 108.883)

_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


def argb_from_rgb(red: int, green: int, blue: int) -> int:
  '''Packs 8-bit channels into an opaque ARGB integer.'''
  return 255 << 24 | (red & 255) << 16 | (green & 255) << 8 | blue & 255


def alpha_from_argb(argb: int) -> int:
  return argb >> 24 & 255


def red_from_argb(argb: int) -> int:
  return argb >> 16 & 255


def green_from_argb(argb: int) -> int:
  return argb >> 8 & 255


def blue_from_argb(argb: int) -> int:
  return argb & 255


def is_opaque(argb: int) -> bool:
  return alpha_from_argb(argb) == 255


def linearized(rgb_component: int) -> float:
  '''
  Undoes the sRGB transfer curve.
  :param rgb_component: 0 <= rgb_component <= 255
  :return: 0.0 <= output <= 100.0, the channel in linear RGB
  '''
  normalized = rgb_component / 255.0
  if normalized <= 0.040449936:
    return normalized / 12.92 * 100.0
  return math.pow((normalized + 0.055) / 1.055, 2.4) * 100.0


def delinearized(rgb_component: float) -> int:
  '''
  Applies the sRGB transfer curve and quantizes.
  :param rgb_component: linear channel, nominally 0.0 to 100.0
  :return: 0 <= output <= 255
  '''
  normalized = rgb_component / 100.0
  if normalized <= 0.0031308:
    encoded = normalized * 12.92
  else:
    encoded = 1.055 * math.pow(normalized, 1.0 / 2.4) - 0.055
  return clamp(0, 255, round(encoded * 255.0))


def argb_from_linrgb(linrgb: Vec3f) -> int:
  r, g, b = (delinearized(channel) for channel in linrgb)
  return argb_from_rgb(r, g, b)


def linrgb_from_argb(argb: int) -> Vec3f:
  return (
    linearized(red_from_argb(argb)),
    linearized(green_from_argb(argb)),
    linearized(blue_from_argb(argb)),
  )


def argb_from_xyz(x: float, y: float, z: float) -> int:
  return argb_from_linrgb(matrix_multiply((x, y, z), XYZ_TO_SRGB))


def xyz_from_argb(argb: int) -> Vec3f:
  return matrix_multiply(linrgb_from_argb(argb), SRGB_TO_XYZ)


def lab_f(t: float) -> float:
  if t > _EPSILON:
    return math.pow(t, 1.0 / 3.0)
  return (_KAPPA * t + 16) / 116


def lab_invf(ft: float) -> float:
  ft3 = ft * ft * ft
  if ft3 > _EPSILON:
    return ft3
  return (116 * ft - 16) / _KAPPA


def lab_from_argb(argb: int) -> Vec3f:
  '''
  :param argb: packed color
  :return: (L*, a*, b*) relative to D65
  '''
  x, y, z = xyz_from_argb(argb)
  fx = lab_f(x / WHITE_POINT_D65[0])
  fy = lab_f(y / WHITE_POINT_D65[1])
  fz = lab_f(z / WHITE_POINT_D65[2])
  return (116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def argb_from_lab(l: float, a: float, b: float) -> int:
  fy = (l + 16.0) / 116.0
  fx = a / 500.0 + fy
  fz = fy - b / 200.0
  return argb_from_xyz(
    lab_invf(fx) * WHITE_POINT_D65[0],
    lab_invf(fy) * WHITE_POINT_D65[1],
    lab_invf(fz) * WHITE_POINT_D65[2],
  )


def y_from_lstar(lstar: float) -> float:
  '''
  L* in L*a*b* and Y in XYZ measure the same quantity, luminance. L* is linear to human
  perception while Y is linear to light intensity.

  :param lstar: L* in L*a*b*
  :return: Y in XYZ, 0 to 100
  '''
  if lstar > 8.0:
    return math.pow((lstar + 16.0) / 116.0, 3.0) * 100.0
  return lstar / _KAPPA * 100.0


def lstar_from_y(y: float) -> float:
  normalized = y / 100.0
  if normalized <= _EPSILON:
    return _KAPPA * normalized
  return 116.0 * math.pow(normalized, 1.0 / 3.0) - 16.0


def lstar_from_argb(argb: int) -> float:
  '''L* of a color. Cheaper than lab_from_argb when only lightness is needed.'''
  return lstar_from_y(xyz_from_argb(argb)[1])


def argb_from_lstar(lstar: float) -> int:
  '''
  :param lstar: L* in L*a*b*
  :return: the gray with that lightness
  '''
  fy = (lstar + 16.0) / 116.0
  y = fy * fy * fy if lstar > 8.0 else lstar / _KAPPA
  xz = fy * fy * fy if fy * fy * fy > _EPSILON else lstar / _KAPPA
  return argb_from_xyz(xz * WHITE_POINT_D65[0], y * WHITE_POINT_D65[1], xz * WHITE_POINT_D65[2])
