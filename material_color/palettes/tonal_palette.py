# pyright: strict
from typing import Dict, Optional, Sequence, Tuple

from ..hct import argb_from_hct

COMMON_TONES: Tuple[int, ...] = (0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 95, 99, 100)
COMMON_SIZE = len(COMMON_TONES)


class TonalPalette:
  '''
  A convenience class for retrieving colors that are constant in hue and chroma, but vary in tone.

  A palette is either generative, built from a hue and chroma, or fixed, built from a list of
  colors at COMMON_TONES. Only the former can produce arbitrary tones.
  '''

  def __init__(self, hue: Optional[float], chroma: Optional[float], cache: Dict[int, int]) -> None:
    self._hue = hue
    self._chroma = chroma
    self._cache = cache

  @classmethod
  def from_hue_and_chroma(cls, hue: float, chroma: float) -> "TonalPalette":
    return cls(hue, chroma, {})

  @classmethod
  def from_list(cls, colors: Sequence[int]) -> "TonalPalette":
    '''
    :param colors: ARGB colors, one per entry of COMMON_TONES, in that order.
    :raises ValueError: the list has the wrong length
    '''
    if len(colors) != COMMON_SIZE:
      raise ValueError(f"TonalPalette needs {COMMON_SIZE} colors, got {len(colors)}")
    return cls(None, None, dict(zip(COMMON_TONES, colors)))

  @property
  def hue(self) -> Optional[float]:
    return self._hue

  @property
  def chroma(self) -> Optional[float]:
    return self._chroma

  def tone(self, tone: int) -> int:
    '''
    :param tone: HCT tone, 0 to 100.
    :return: ARGB representation of a color with that tone.
    :raises ValueError: the palette was built from a list and tone is not one of COMMON_TONES
    '''
    if tone in self._cache:
      return self._cache[tone]
    if self._hue is None or self._chroma is None:
      raise ValueError(f"A TonalPalette built from a list only has tones {COMMON_TONES}, got {tone}")
    color = self._cache[tone] = argb_from_hct(self._hue, self._chroma, tone)
    return color

  def as_list(self) -> Tuple[int, ...]:
    return tuple(self.tone(tone) for tone in COMMON_TONES)

  def __repr__(self) -> str:
    if self._hue is None:
      return f"TonalPalette.from_list({list(self.as_list())})"
    return f"TonalPalette.from_hue_and_chroma({self._hue}, {self._chroma})"
