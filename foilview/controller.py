from dataclasses import replace
import logging
from typing import Optional

from .naca import Profile, generate_profile
from .params import FoilParams, ParamKind
from .render import Viewport, ViewTransform, render
from .surface import DrawingSurface

logger = logging.getLogger(__name__)


class FoilController:
    """Command interface between input controls and the renderer.

    Holds the current parameters and viewport. Every command rebuilds the
    profile from scratch and redraws the whole surface.
    """

    def __init__(
        self,
        surface: DrawingSurface,
        width: float,
        height: float,
        pixel_ratio: float = 1.0,
        params: Optional[FoilParams] = None,
    ):
        self.surface = surface
        self._viewport = Viewport(width, height, pixel_ratio)
        self._params = params if params is not None else FoilParams()
        self._profile = generate_profile(self._params)
        self._view: Optional[ViewTransform] = None
        self.redraw()

    @property
    def params(self) -> FoilParams:
        return self._params

    @property
    def profile(self) -> Profile:
        return self._profile

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def view(self) -> Optional[ViewTransform]:
        """Transform used by the most recent redraw."""
        return self._view

    def set_parameter(self, kind: ParamKind | str, value: float) -> Profile:
        """Replace one input (clamped to its range), regenerate and redraw."""
        self._params = self._params.with_param(kind, value)
        self._profile = generate_profile(self._params)
        logger.debug("Set %s -> %s", ParamKind(kind), self._params.label(ParamKind(kind)))
        self.redraw()
        return self._profile

    def resize(self, width: float, height: float, pixel_ratio: Optional[float] = None) -> None:
        """Update the drawing area size and redraw."""
        if pixel_ratio is None:
            pixel_ratio = self._viewport.pixel_ratio
        self._viewport = replace(
            self._viewport, width=width, height=height, pixel_ratio=pixel_ratio
        )
        logger.debug("Resized to %gx%g (ratio %g)", width, height, pixel_ratio)
        self.redraw()

    def redraw(self) -> None:
        self._view = render(self.surface, self._profile, self._viewport)

    def labels(self) -> dict[ParamKind, str]:
        return {kind: self._params.label(kind) for kind in ParamKind}
