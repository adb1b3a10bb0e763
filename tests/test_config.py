'''Tests for configuration models and YAML loading.'''

import pydantic
import pytest

from material_color.config import Config, SearchConfig, ViewingConfig
from material_color.hct import Hct
from material_color.hct.gamut import solve
from material_color.hct.viewing_conditions import ViewingConditions


class TestSearchConfig:
  def test_defaults(self):
    config = SearchConfig()
    assert config.chroma_search_endpoint == 0.4
    assert config.de_max == 1.0
    assert config.dl_max == 0.2
    assert config.de_max_error == 1e-9
    assert config.lightness_search_endpoint == 0.01

  @pytest.mark.parametrize("field, value", [("dl_max", -1.0), ("de_max", 0.0), ("max_iterations", 0)])
  def test_invalid(self, field: str, value: float):
    with pytest.raises(pydantic.ValidationError):
      SearchConfig(**{field: value})


class TestViewingConfig:
  def test_default_is_standard(self):
    assert ViewingConfig().make() is ViewingConditions.standard()

  def test_custom(self):
    vc = ViewingConfig(surround=1.0, background_lstar=20.0, white_point=(96.0, 100.0, 82.0)).make()
    assert vc.surround == 1.0
    assert vc.background_lstar == 30.0
    assert vc.white_point == (96.0, 100.0, 82.0)

  def test_surround_out_of_range(self):
    with pytest.raises(ValueError):
      ViewingConfig(surround=3.0)

  def test_white_point_needs_positive_y(self):
    with pytest.raises(pydantic.ValidationError, match="white point"):
      ViewingConfig(white_point=(95.047, 0.0, 108.883))

  def test_degenerate_white_point_rejected_on_make(self):
    with pytest.raises(ValueError, match="white point"):
      ViewingConfig(white_point=(95.047, 100.0, -1000.0)).make()


class TestConfigLoad:
  def test_missing_file(self, tmp_path):
    assert Config.load(str(tmp_path / "missing.yaml")) == Config()

  def test_load(self, tmp_path):
    file = tmp_path / "material_color.yaml"
    file.write_text("search:\n  dl_max: 0.1\nviewing:\n  surround: 1.5\n")
    config = Config.load(str(file))
    assert config.search.dl_max == 0.1
    assert config.search.de_max == 1.0
    assert config.viewing.surround == 1.5

  def test_empty_file(self, tmp_path):
    file = tmp_path / "empty.yaml"
    file.write_text("")
    assert Config.load(str(file)) == Config()

  def test_invalid_file_falls_back(self, tmp_path):
    file = tmp_path / "bad.yaml"
    file.write_text("viewing:\n  surround: 3\n")
    assert Config.load(str(file)) == Config()


class TestLoadedConfigInUse:
  def test_loaded_models_drive_hct(self, tmp_path):
    file = tmp_path / "material_color.yaml"
    file.write_text("search:\n  max_iterations: 1\nviewing:\n  surround: 1.0\n")
    config = Config.load(str(file))
    vc = config.viewing.make()
    hct = Hct(0.0, 30.0, 90.0, vc, config.search)
    assert hct.viewing_conditions is vc
    assert int(hct) == solve(0.0, 30.0, 90.0, vc, config.search).argb
