'''Tests for light and dark schemes.'''

import pytest

from material_color.color_utils import lstar_from_argb
from material_color.palettes import CorePalette
from material_color.scheme import Scheme

SOURCE = 0xff4285f4


class TestLightScheme:
  def test_fixed_roles(self):
    scheme = Scheme.light(SOURCE)
    assert scheme.on_primary == 0xffffffff
    assert scheme.shadow == 0xff000000

  def test_tones(self):
    scheme = Scheme.light(SOURCE)
    assert lstar_from_argb(scheme.primary) == pytest.approx(40.0, abs=0.2)
    assert lstar_from_argb(scheme.background) == pytest.approx(99.0, abs=0.2)
    assert scheme.background == scheme.surface

  def test_from_core_palette(self):
    assert Scheme.light_from_core_palette(CorePalette.of(SOURCE)) == Scheme.light(SOURCE)


class TestDarkScheme:
  def test_tones(self):
    scheme = Scheme.dark(SOURCE)
    assert lstar_from_argb(scheme.primary) == pytest.approx(80.0, abs=0.2)
    assert lstar_from_argb(scheme.surface) == pytest.approx(10.0, abs=0.2)
    assert scheme.shadow == 0xff000000

  def test_inverse_primary_matches_light(self):
    assert Scheme.dark(SOURCE).inverse_primary == Scheme.light(SOURCE).primary

  def test_list_built_palette(self):
    palette = CorePalette.from_list([0xff000000 | i for i in range(65)])
    scheme = Scheme.dark_from_core_palette(palette)
    # primary at tone 80 is the 9th of the common tones
    assert scheme.primary == 0xff000008
