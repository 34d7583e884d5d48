# tattoo_studio/scheduling/layout.py

from pydantic import BaseModel, ConfigDict

from ..data import PIXELS_PER_HOUR
from .ranges import duration_minutes, minutes_since_midnight
from .types import TimeRange


class GridPlacement(BaseModel):
    model_config = ConfigDict(frozen=True)

    top_offset_px: float
    height_px: float


def project(
    r: TimeRange,
    window_start_hour: int = 0,
    pixels_per_hour: float = PIXELS_PER_HOUR,
) -> GridPlacement:
    """
    Maps a range onto a day grid that starts at `window_start_hour`.

    Nothing is clamped: ranges that start before the window get a negative
    offset and the renderer clips them.
    """
    offset_minutes = minutes_since_midnight(r.start) - window_start_hour * 60
    return GridPlacement(
        top_offset_px=offset_minutes / 60 * pixels_per_hour,
        height_px=duration_minutes(r) / 60 * pixels_per_hour,
    )
