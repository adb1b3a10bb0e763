from .core_palette import CorePalette
from .tonal_palette import COMMON_TONES, TonalPalette

__all__ = ["COMMON_TONES", "CorePalette", "TonalPalette"]
