"""
Interactive NACA 4-digit viewer.

A matplotlib window with a pixel canvas on top and one slider per input
below. Moving a slider or resizing the window redraws the whole canvas.

Run with: python -m foilview.app
"""

import logging
import sys

import matplotlib.pyplot as plt
from matplotlib.widgets import Slider

from . import config
from .controller import FoilController
from .logging_config import setup_logging
from .params import PARAM_RANGES, FoilParams, ParamKind
from .surface import MatplotlibSurface

logger = logging.getLogger(__name__)

CANVAS_RECT = (0.0, 0.28, 1.0, 0.72)
SLIDER_LEFT = 0.2
SLIDER_WIDTH = 0.6
SLIDER_HEIGHT = 0.03
SLIDER_TOP = 0.2
SLIDER_SPACING = 0.05


class FoilApp:
    def __init__(self, params: FoilParams | None = None, fig=None):
        if fig is None:
            fig = plt.figure(figsize=config.FIGURE_SIZE)
        self.fig = fig
        params = params if params is not None else FoilParams()

        self.canvas_ax = fig.add_axes(CANVAS_RECT)
        self.surface = MatplotlibSurface(self.canvas_ax, config.CANVAS_BACKGROUND)

        width, height, ratio = self.canvas_size()
        self.controller = FoilController(self.surface, width, height, ratio, params)

        self.sliders: dict[ParamKind, Slider] = {}
        for i, kind in enumerate(ParamKind):
            self.sliders[kind] = self._add_slider(kind, params, i)

        fig.canvas.mpl_connect("resize_event", self._on_resize)
        self._update_title()
        logger.info("Viewer ready with %s", params.designation)

    def _add_slider(self, kind: ParamKind, params: FoilParams, row: int) -> Slider:
        rng = PARAM_RANGES[kind]
        bottom = SLIDER_TOP - row * SLIDER_SPACING
        ax = self.fig.add_axes((SLIDER_LEFT, bottom, SLIDER_WIDTH, SLIDER_HEIGHT))
        slider = Slider(
            ax,
            kind.display_name,
            rng.minimum,
            rng.maximum,
            valinit=params.get(kind),
            valstep=rng.step,
            valfmt=rng.fmt,
        )
        slider.on_changed(lambda value: self.on_change(kind, value))
        return slider

    def canvas_size(self) -> tuple[float, float, float]:
        """Logical size of the canvas axes and the device pixel ratio."""
        ratio = float(getattr(self.fig.canvas, "device_pixel_ratio", 1.0) or 1.0)
        bbox = self.canvas_ax.get_window_extent()
        return bbox.width / ratio, bbox.height / ratio, ratio

    def on_change(self, kind: ParamKind, value: float) -> None:
        self.controller.set_parameter(kind, value)
        self._update_title()
        self.surface.flush()

    def _on_resize(self, event) -> None:
        width, height, ratio = self.canvas_size()
        self.controller.resize(width, height, ratio)
        self.surface.flush()

    def _update_title(self) -> None:
        self.fig.suptitle(self.controller.params.designation)

    def show(self) -> None:
        plt.show()


def main() -> int:
    setup_logging(logging.INFO)
    app = FoilApp()
    app.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
