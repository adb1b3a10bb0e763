# pyright: strict
from typing import NamedTuple, Optional

from loguru import logger

from ..color_utils import argb_from_lstar, lstar_from_argb
from ..config import SearchConfig
from ..math_utils import clamp, sanitize_degrees
from .cam16 import Cam16
from .viewing_conditions import ViewingConditions

'''
Gamut mapping from a requested hue, chroma and tone to a displayable sRGB color.

Chroma and lightness interact nonlinearly in CAM16, the sRGB gamut boundary at a fixed hue is not
convex in J-C space, so there is no closed form. Two nested binary searches are used instead: the
outer one over chroma, the inner one over J. Clipped L* is monotonic in J for a fixed hue and
chroma, and achievability is monotonic in chroma for a fixed hue and tone.
'''

DEFAULT_SEARCH = SearchConfig()


class GamutMatch(NamedTuple):
  argb: int
  cam: Cam16


class _Candidate(NamedTuple):
  match: GamutMatch
  delta_l: float
  delta_e: float


def _gray(tone: float, viewing_conditions: ViewingConditions) -> GamutMatch:
  argb = argb_from_lstar(tone)
  return GamutMatch(argb, Cam16.from_argb(argb, viewing_conditions))


def find_cam_by_j(
  hue: float,
  chroma: float,
  tone: float,
  viewing_conditions: Optional[ViewingConditions] = None,
  config: SearchConfig = DEFAULT_SEARCH,
) -> Optional[GamutMatch]:
  '''
  Searches J for a color with the requested hue and chroma whose L* is the requested tone.

  :param hue: CAM16 hue
  :param chroma: CAM16 chroma
  :param tone: L*a*b* lightness
  :return: the rendered color closest to the request in CAM16-UCS, or None if no J gives a color
           within dl_max of tone and de_max of the request.
  '''
  vc = viewing_conditions or ViewingConditions.standard()
  low = 0.0
  high = 100.0
  best: Optional[_Candidate] = None
  for _ in range(config.max_iterations):
    if abs(high - low) < config.lightness_search_endpoint:
      break
    mid = low + (high - low) / 2
    requested = Cam16.from_jch(mid, chroma, hue, vc)
    clipped = requested.to_argb(vc)
    clipped_lstar = lstar_from_argb(clipped)
    delta_l = abs(tone - clipped_lstar)
    if delta_l < config.dl_max:
      clipped_cam = Cam16.from_argb(clipped, vc)
      # hue drift of the clipped color, at its own lightness and chroma
      delta_e = clipped_cam.distance(Cam16.from_jch(clipped_cam.j, clipped_cam.chroma, hue, vc))
      if delta_e <= config.de_max and (best is None or delta_e < best.delta_e):
        best = _Candidate(GamutMatch(clipped, clipped_cam), delta_l, delta_e)
    if best is not None and best.delta_l == 0 and best.delta_e < config.de_max_error:
      break
    if clipped_lstar < tone:
      low = mid
    else:
      high = mid
  else:
    if abs(high - low) >= config.lightness_search_endpoint:
      logger.warning(f"J search hit {config.max_iterations} iterations at H{hue:.2f} C{chroma:.2f} T{tone:.2f}")
  return None if best is None else best.match


def solve(
  hue: float,
  chroma: float,
  tone: float,
  viewing_conditions: Optional[ViewingConditions] = None,
  config: SearchConfig = DEFAULT_SEARCH,
) -> GamutMatch:
  '''
  Finds the in-gamut color with L* closest to tone and the highest chroma not above the request.
  Never fails: when nothing chromatic fits, the gray of the requested tone is returned.

  :param hue: in degrees, any value, wrapped into [0, 360)
  :param chroma: informally, colorfulness. The chroma found may be lower than requested, each hue
                 and tone has a different maximum.
  :param tone: lightness, clamped into [0, 100]
  '''
  vc = viewing_conditions or ViewingConditions.standard()
  hue = sanitize_degrees(hue)
  tone = clamp(0.0, 100.0, tone)
  if chroma < 1.0 or round(tone) <= 0 or round(tone) >= 100:
    return _gray(tone, vc)

  # the requested chroma is usually reachable, try it before bisecting
  exact = find_cam_by_j(hue, chroma, tone, vc, config)
  if exact is not None:
    return exact
  logger.trace(f"C{chroma:.2f} unreachable at H{hue:.2f} T{tone:.2f}, bisecting")

  low = 0.0
  high = chroma
  answer: Optional[GamutMatch] = None
  for _ in range(config.max_iterations):
    if abs(high - low) < config.chroma_search_endpoint:
      break
    mid = low + (high - low) / 2
    possible = find_cam_by_j(hue, mid, tone, vc, config)
    if possible is None:
      high = mid
    else:
      answer = possible
      low = mid
  else:
    if abs(high - low) >= config.chroma_search_endpoint:
      logger.warning(f"Chroma search hit {config.max_iterations} iterations at H{hue:.2f} T{tone:.2f}")

  if answer is None:
    logger.trace(f"No chroma fits H{hue:.2f} T{tone:.2f}, falling back to gray")
    return _gray(tone, vc)
  return answer
