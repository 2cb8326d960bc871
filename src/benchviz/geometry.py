"""
Geometry and configuration for a benchviz canvas.

Configuration is layered with OmegaConf: dataclass defaults, then an
optional YAML file, then explicit command line flags.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from omegaconf import OmegaConf

from .constants import (
    DEFAULT_BAR_AREA_WIDTH,
    DEFAULT_BAR_HEIGHT,
    DEFAULT_DELTA_MAX,
    DEFAULT_HEIGHT,
    DEFAULT_HIGHLIGHT_COLOR,
    DEFAULT_HIGHLIGHT_THRESHOLD,
    DEFAULT_IMPROVEMENT_COLOR,
    DEFAULT_LEFT,
    DEFAULT_REGRESSION_COLOR,
    DEFAULT_SPEEDUP_MAX,
    DEFAULT_TOP,
    DEFAULT_WIDTH,
    DEFAULT_ZERO_POINT,
    STYLE_BAR,
    STYLES,
)


@dataclass(frozen=True)
class Geometry:
    """Layout of the visualization."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    top: int = DEFAULT_TOP
    left: int = DEFAULT_LEFT
    vp: int = DEFAULT_ZERO_POINT
    vwidth: int = DEFAULT_BAR_AREA_WIDTH
    bar_height: int = DEFAULT_BAR_HEIGHT
    speedup_max: float = DEFAULT_SPEEDUP_MAX
    delta_max: float = DEFAULT_DELTA_MAX
    title: str = ""
    scolor: str = DEFAULT_IMPROVEMENT_COLOR
    rcolor: str = DEFAULT_REGRESSION_COLOR
    hcolor: str = DEFAULT_HIGHLIGHT_COLOR
    highlight_threshold: float = DEFAULT_HIGHLIGHT_THRESHOLD
    style: str = STYLE_BAR
    dolines: bool = False
    coldata: bool = False
    coltitle: bool = True

    def __post_init__(self) -> None:
        if not (math.isfinite(self.speedup_max) and self.speedup_max > 0):
            raise ValueError(f"speedup max must be positive, got {self.speedup_max}")
        if not (math.isfinite(self.delta_max) and self.delta_max > 0):
            raise ValueError(f"delta max must be positive, got {self.delta_max}")
        if self.bar_height <= 0:
            raise ValueError(f"bar height must be positive, got {self.bar_height}")
        if self.style not in STYLES:
            raise ValueError(
                f"unknown style '{self.style}' (expected one of: {', '.join(STYLES)})"
            )

    @property
    def vspacing(self) -> int:
        """Vertical distance between consecutive rows."""
        return self.bar_height + self.bar_height // 3

    @property
    def zero_point(self) -> int:
        """Canvas x-coordinate where diverging bars start."""
        return self.left + self.vp


def load_geometry(
    config_path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None
) -> Geometry:
    """Build a Geometry from defaults, an optional YAML file and overrides.

    Overrides set to None are ignored, so unset command line flags never mask
    values from the file.
    """
    try:
        config = OmegaConf.structured(Geometry)
        OmegaConf.set_readonly(config, False)

        if config_path:
            config = OmegaConf.merge(config, OmegaConf.load(config_path))

        if overrides:
            explicit = {k: v for k, v in overrides.items() if v is not None}
            config = OmegaConf.merge(config, OmegaConf.create(explicit))

        values = OmegaConf.to_container(config, resolve=True)
    except Exception as e:
        raise RuntimeError(f"Failed to load configuration: {e}") from e

    return Geometry(**values)
