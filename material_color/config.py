import os
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

import yaml
from loguru import logger
from pydantic import BaseModel, Field, PositiveFloat, field_validator

if TYPE_CHECKING:
  from .hct.viewing_conditions import ViewingConditions

'''
Search tolerances and viewing conditions, loadable from a YAML file.

Nothing reads the file implicitly. Load a Config and hand its parts to the color code yourself:
  config = Config.load("material_color.yaml")
  hct = Hct(hue, chroma, tone, config.viewing.make(), config.search)
'''

__all__ = ["SearchConfig", "ViewingConfig", "Config"]


class SearchConfig(BaseModel):
  '''Tolerances of the gamut mapping search.'''
  model_config = {"frozen": True}

  chroma_search_endpoint: PositiveFloat = 0.4
  de_max: PositiveFloat = 1.0
  dl_max: PositiveFloat = 0.2
  de_max_error: PositiveFloat = 1e-9
  lightness_search_endpoint: PositiveFloat = 0.01
  max_iterations: int = Field(100, ge=1)


class ViewingConfig(BaseModel):
  model_config = {"frozen": True}

  white_point: Optional[Tuple[float, float, float]] = None
  adapting_luminance: Optional[PositiveFloat] = None
  background_lstar: float = 50.0
  surround: float = Field(2.0, ge=0.0, le=2.0)
  discounting_illuminant: bool = False

  @field_validator("white_point")
  @classmethod
  def check_white_point(cls, value: Optional[Tuple[float, float, float]]) -> Optional[Tuple[float, float, float]]:
    if value is not None and value[1] <= 0.0:
      raise ValueError(f"white point {value} must have a positive Y")
    return value

  def make(self) -> "ViewingConditions":
    from .hct.viewing_conditions import ViewingConditions
    if self == ViewingConfig():
      return ViewingConditions.standard()
    kwargs: Dict[str, Any] = {} if self.white_point is None else {"white_point": self.white_point}
    return ViewingConditions.make(
      adapting_luminance=self.adapting_luminance,
      background_lstar=self.background_lstar,
      surround=self.surround,
      discounting_illuminant=self.discounting_illuminant,
      **kwargs,
    )


class Config(BaseModel):
  search: SearchConfig = Field(default_factory=SearchConfig)
  viewing: ViewingConfig = Field(default_factory=ViewingConfig)

  @classmethod
  def load(cls, file: str) -> "Config":
    if not os.path.exists(file):
      logger.info(f"配置文件不存在: {file}")
      return cls()
    try:
      with open(file) as f:
        return cls.model_validate(yaml.safe_load(f) or {})
    except Exception:
      logger.opt(exception=True).warning(f"无法读取配置：{file}")
      return cls()
