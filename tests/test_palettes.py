'''Tests for tonal and core palettes.'''

import pytest

from material_color.color_utils import lstar_from_argb
from material_color.hct import Cam16
from material_color.palettes import COMMON_TONES, CorePalette, TonalPalette


class TestTonalPalette:
  def test_extremes(self):
    palette = TonalPalette.from_hue_and_chroma(270.0, 36.0)
    assert palette.tone(100) == 0xffffffff
    assert palette.tone(0) == 0xff000000

  @pytest.mark.parametrize("tone", [10, 40, 50, 90])
  def test_tone_is_met(self, tone: int):
    palette = TonalPalette.from_hue_and_chroma(270.0, 36.0)
    assert lstar_from_argb(palette.tone(tone)) == pytest.approx(tone, abs=0.2)

  def test_cached(self):
    palette = TonalPalette.from_hue_and_chroma(120.0, 30.0)
    assert palette.tone(37) == palette.tone(37)
    assert len(palette.as_list()) == len(COMMON_TONES)

  def test_from_list(self):
    palette = TonalPalette.from_list(list(range(13)))
    assert palette.tone(0) == 0
    assert palette.tone(95) == 10
    assert palette.tone(100) == 12
    assert palette.as_list() == tuple(range(13))
    assert palette.hue is None

  def test_from_list_wrong_length(self):
    with pytest.raises(ValueError, match="13 colors"):
      TonalPalette.from_list([0xff000000] * 12)

  def test_from_list_missing_tone(self):
    palette = TonalPalette.from_list(list(range(13)))
    with pytest.raises(ValueError):
      palette.tone(55)


class TestCorePalette:
  def test_of_blue(self):
    cam = Cam16.from_argb(0xff0000ff)
    palette = CorePalette.of(0xff0000ff)
    assert palette.primary.hue == pytest.approx(cam.hue)
    assert palette.primary.chroma == pytest.approx(cam.chroma)
    assert palette.secondary.chroma == 16
    assert palette.tertiary.hue == pytest.approx(cam.hue + 60.0)
    assert palette.tertiary.chroma == 24
    assert palette.neutral.chroma == 4
    assert palette.neutral_variant.chroma == 8
    assert (palette.error.hue, palette.error.chroma) == (25, 84)

  def test_primary_chroma_floor(self):
    assert CorePalette.of(0xff808080).primary.chroma == 48

  def test_list_round_trip(self):
    colors = list(range(65))
    assert CorePalette.from_list(colors).as_list() == tuple(colors)

  def test_partitions_in_order(self):
    palette = CorePalette.from_list(list(range(65)))
    assert palette.secondary.tone(0) == 13
    assert palette.neutral_variant.tone(100) == 64

  @pytest.mark.parametrize("size", [0, 64, 78])
  def test_from_list_wrong_length(self, size: int):
    with pytest.raises(ValueError, match="65 colors"):
      CorePalette.from_list([0xff000000] * size)
