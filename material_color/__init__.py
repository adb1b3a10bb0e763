# 修改自 https://github.com/avanisubbiah/material-color-utilities-python
# 只保留 HCT 核心及其调色板、配色方案、色相协调
# pyright: strict
from .blend import harmonize
from .color_utils import argb_from_lstar, lstar_from_argb
from .hct import Cam16, Hct, ViewingConditions, argb_from_hct, hct_from_argb
from .math_utils import difference_degrees, sanitize_degrees
from .palettes import CorePalette, TonalPalette
from .scheme import Scheme

__all__ = [
  "Cam16", "CorePalette", "Hct", "Scheme", "TonalPalette", "ViewingConditions", "argb_from_hct",
  "argb_from_lstar", "difference_degrees", "harmonize", "hct_from_argb", "lstar_from_argb",
  "sanitize_degrees",
]
