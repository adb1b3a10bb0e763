# pyright: strict
from typing import Sequence, Tuple

from ..hct import Cam16
from .tonal_palette import COMMON_SIZE, TonalPalette

SIZE = 5
'''Number of palettes stored by from_list and as_list, the error palette is always generated.'''


class CorePalette:
  '''
  An intermediate concept between the key color for a UI theme, and a full color scheme. 5 tonal
  palettes are generated, all except one use the same hue as the key color, and all vary in chroma.
  '''

  def __init__(
    self,
    primary: TonalPalette,
    secondary: TonalPalette,
    tertiary: TonalPalette,
    neutral: TonalPalette,
    neutral_variant: TonalPalette,
  ) -> None:
    self.primary = primary
    self.secondary = secondary
    self.tertiary = tertiary
    self.neutral = neutral
    self.neutral_variant = neutral_variant
    self.error = TonalPalette.from_hue_and_chroma(25, 84)

  @classmethod
  def of(cls, argb: int) -> "CorePalette":
    cam = Cam16.from_argb(argb)
    hue = cam.hue
    return cls(
      TonalPalette.from_hue_and_chroma(hue, max(48, cam.chroma)),
      TonalPalette.from_hue_and_chroma(hue, 16),
      TonalPalette.from_hue_and_chroma(hue + 60, 24),
      TonalPalette.from_hue_and_chroma(hue, 4),
      TonalPalette.from_hue_and_chroma(hue, 8),
    )

  @classmethod
  def from_list(cls, colors: Sequence[int]) -> "CorePalette":
    '''
    Inverse of as_list.
    :raises ValueError: colors is not exactly SIZE concatenated tonal palettes
    '''
    if len(colors) != SIZE * COMMON_SIZE:
      raise ValueError(f"CorePalette needs {SIZE * COMMON_SIZE} colors, got {len(colors)}")
    palettes = [
      TonalPalette.from_list(colors[i * COMMON_SIZE:(i + 1) * COMMON_SIZE]) for i in range(SIZE)
    ]
    return cls(*palettes)

  def as_list(self) -> Tuple[int, ...]:
    palettes = (self.primary, self.secondary, self.tertiary, self.neutral, self.neutral_variant)
    return tuple(color for palette in palettes for color in palette.as_list())

  def __repr__(self) -> str:
    return (
      f"CorePalette(primary={self.primary}, secondary={self.secondary}, "
      f"tertiary={self.tertiary}, neutral={self.neutral}, "
      f"neutral_variant={self.neutral_variant}, error={self.error})"
    )
