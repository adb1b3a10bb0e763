# pyright: strict
from typing import Optional, Tuple

from ..color_utils import lstar_from_argb
from ..config import SearchConfig
from .cam16 import Cam16
from .gamut import DEFAULT_SEARCH, GamutMatch, solve
from .viewing_conditions import ViewingConditions

'''
A color system built using CAM16 hue and chroma, and L* from L*a*b*.

Using L* creates a link between the color system, contrast, and thus accessibility. Contrast ratio
depends on relative luminance, or Y in the XYZ color space. L*, or perceptual luminance can be
calculated from Y.

Unlike Y, L* is linear to human perception, allowing trivial creation of accurate color tones.

Unlike contrast ratio, measuring contrast in L* is linear, and simple to calculate. A difference of
40 in HCT tone guarantees a contrast ratio >= 3.0, and a difference of 50 guarantees a contrast
ratio >= 4.5.
'''

__all__ = ["Cam16", "Hct", "ViewingConditions", "argb_from_hct", "hct_from_argb"]


class Hct:
  '''
  HCT, hue, chroma, and tone. A color system that provides a perceptually accurate color
  measurement system that can also accurately render what colors will appear as in different
  lighting environments.

  Instances are immutable, two of them are equal when they render to the same ARGB integer.
  '''

  __slots__ = ("_argb", "_hue", "_chroma", "_tone", "_viewing_conditions", "_config")

  def __init__(
    self,
    hue: float,
    chroma: float,
    tone: float,
    viewing_conditions: Optional[ViewingConditions] = None,
    config: SearchConfig = DEFAULT_SEARCH,
  ) -> None:
    '''
    :param hue: 0 <= hue < 360; invalid values are corrected.
    :param chroma: 0 <= chroma < ?; the color returned may have less chroma, the maximum differs
                   for each hue and tone.
    :param tone: 0 <= tone <= 100; invalid values are corrected.
    :param config: tolerances of the gamut mapping search, also used by with_hue and friends.
    '''
    self._viewing_conditions = viewing_conditions or ViewingConditions.standard()
    self._config = config
    self._set(solve(hue, chroma, tone, self._viewing_conditions, config))

  def _set(self, match: GamutMatch) -> None:
    self._argb = match.argb
    self._hue = match.cam.hue
    self._chroma = match.cam.chroma
    self._tone = lstar_from_argb(match.argb)

  @classmethod
  def from_argb(
    cls, argb: int, viewing_conditions: Optional[ViewingConditions] = None, config: SearchConfig = DEFAULT_SEARCH,
  ) -> "Hct":
    '''
    :param argb: ARGB representation of a color, alpha is ignored.
    :return: HCT representation of the color, no search needed since a real color is always
             achievable.
    '''
    argb = 0xff000000 | argb & 0xffffff
    vc = viewing_conditions or ViewingConditions.standard()
    hct = cls.__new__(cls)
    hct._viewing_conditions = vc
    hct._config = config
    hct._set(GamutMatch(argb, Cam16.from_argb(argb, vc)))
    return hct

  @property
  def hue(self) -> float:
    '''A number, in degrees, representing ex. red, orange, yellow, etc. Ranges from 0 <= hue < 360.'''
    return self._hue

  @property
  def chroma(self) -> float:
    return self._chroma

  @property
  def tone(self) -> float:
    '''Lightness. Ranges from 0 to 100.'''
    return self._tone

  @property
  def viewing_conditions(self) -> ViewingConditions:
    return self._viewing_conditions

  def to_argb(self) -> int:
    return self._argb

  def __int__(self) -> int:
    return self._argb

  def with_hue(self, hue: float) -> "Hct":
    '''Chroma may decrease because chroma has a different maximum for any given hue and tone.'''
    return Hct(hue, self._chroma, self._tone, self._viewing_conditions, self._config)

  def with_chroma(self, chroma: float) -> "Hct":
    return Hct(self._hue, chroma, self._tone, self._viewing_conditions, self._config)

  def with_tone(self, tone: float) -> "Hct":
    '''Chroma may decrease because chroma has a different maximum for any given hue and tone.'''
    return Hct(self._hue, self._chroma, tone, self._viewing_conditions, self._config)

  def __eq__(self, other: object) -> bool:
    if not isinstance(other, Hct):
      return NotImplemented
    return self._argb == other._argb

  def __hash__(self) -> int:
    return hash(self._argb)

  def __repr__(self) -> str:
    return f"Hct(0x{self._argb:08x}, H{self._hue:.1f} C{self._chroma:.1f} T{self._tone:.1f})"


def hct_from_argb(argb: int) -> Tuple[float, float, float]:
  ''':return: (hue, chroma, tone) of a color in standard viewing conditions.'''
  hct = Hct.from_argb(argb)
  return hct.hue, hct.chroma, hct.tone


def argb_from_hct(hue: float, chroma: float, tone: float) -> int:
  return solve(hue, chroma, tone).argb
