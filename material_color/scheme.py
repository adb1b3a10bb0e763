# pyright: strict
from dataclasses import dataclass, fields
from typing import Dict, Tuple

from .palettes import CorePalette, TonalPalette

# role: (palette, tone)
_LIGHT: Dict[str, Tuple[str, int]] = {
  "primary": ("primary", 40),
  "on_primary": ("primary", 100),
  "primary_container": ("primary", 90),
  "on_primary_container": ("primary", 10),
  "secondary": ("secondary", 40),
  "on_secondary": ("secondary", 100),
  "secondary_container": ("secondary", 90),
  "on_secondary_container": ("secondary", 10),
  "tertiary": ("tertiary", 40),
  "on_tertiary": ("tertiary", 100),
  "tertiary_container": ("tertiary", 90),
  "on_tertiary_container": ("tertiary", 10),
  "error": ("error", 40),
  "on_error": ("error", 100),
  "error_container": ("error", 90),
  "on_error_container": ("error", 10),
  "background": ("neutral", 99),
  "on_background": ("neutral", 10),
  "surface": ("neutral", 99),
  "on_surface": ("neutral", 10),
  "surface_variant": ("neutral_variant", 90),
  "on_surface_variant": ("neutral_variant", 30),
  "outline": ("neutral_variant", 50),
  "shadow": ("neutral", 0),
  "inverse_surface": ("neutral", 20),
  "inverse_on_surface": ("neutral", 95),
  "inverse_primary": ("primary", 80),
}
_DARK: Dict[str, Tuple[str, int]] = {
  "primary": ("primary", 80),
  "on_primary": ("primary", 20),
  "primary_container": ("primary", 30),
  "on_primary_container": ("primary", 90),
  "secondary": ("secondary", 80),
  "on_secondary": ("secondary", 20),
  "secondary_container": ("secondary", 30),
  "on_secondary_container": ("secondary", 90),
  "tertiary": ("tertiary", 80),
  "on_tertiary": ("tertiary", 20),
  "tertiary_container": ("tertiary", 30),
  "on_tertiary_container": ("tertiary", 90),
  "error": ("error", 80),
  "on_error": ("error", 20),
  "error_container": ("error", 30),
  "on_error_container": ("error", 80),
  "background": ("neutral", 10),
  "on_background": ("neutral", 90),
  "surface": ("neutral", 10),
  "on_surface": ("neutral", 90),
  "surface_variant": ("neutral_variant", 30),
  "on_surface_variant": ("neutral_variant", 80),
  "outline": ("neutral_variant", 60),
  "shadow": ("neutral", 0),
  "inverse_surface": ("neutral", 90),
  "inverse_on_surface": ("neutral", 20),
  "inverse_primary": ("primary", 40),
}


@dataclass(frozen=True)
class Scheme:
  '''Named ARGB colors of a light or dark theme.'''
  primary: int
  on_primary: int
  primary_container: int
  on_primary_container: int
  secondary: int
  on_secondary: int
  secondary_container: int
  on_secondary_container: int
  tertiary: int
  on_tertiary: int
  tertiary_container: int
  on_tertiary_container: int
  error: int
  on_error: int
  error_container: int
  on_error_container: int
  background: int
  on_background: int
  surface: int
  on_surface: int
  surface_variant: int
  on_surface_variant: int
  outline: int
  shadow: int
  inverse_surface: int
  inverse_on_surface: int
  inverse_primary: int

  @staticmethod
  def light(argb: int) -> "Scheme":
    return Scheme.light_from_core_palette(CorePalette.of(argb))

  @staticmethod
  def dark(argb: int) -> "Scheme":
    return Scheme.dark_from_core_palette(CorePalette.of(argb))

  @staticmethod
  def light_from_core_palette(palette: CorePalette) -> "Scheme":
    return _from_roles(palette, _LIGHT)

  @staticmethod
  def dark_from_core_palette(palette: CorePalette) -> "Scheme":
    return _from_roles(palette, _DARK)


def _from_roles(palette: CorePalette, roles: Dict[str, Tuple[str, int]]) -> Scheme:
  colors: Dict[str, int] = {}
  for field in fields(Scheme):
    name, tone = roles[field.name]
    tonal: TonalPalette = getattr(palette, name)
    colors[field.name] = tonal.tone(tone)
  return Scheme(**colors)
