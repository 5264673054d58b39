from foilview.naca import generate_profile
from foilview.params import FoilParams
from foilview.render import Viewport, render
from foilview.surface import RecordingSurface


def main() -> None:
    surface = RecordingSurface()
    profile = generate_profile(FoilParams(resolution=20))
    view = render(surface, profile, Viewport(800, 400, pixel_ratio=1.5))

    print(f"scale_x={view.scale_x:.2f}, scale_y={view.scale_y:.2f}")
    for stroke in surface.strokes:
        print(stroke.color, stroke.width, len(stroke.xy))


if __name__ == "__main__":
    main()
