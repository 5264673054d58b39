import logging

from foilview.app import FoilApp
from foilview.logging_config import setup_logging
from foilview.params import FoilParams


def main() -> None:
    setup_logging(logging.DEBUG)
    app = FoilApp(FoilParams(camber=0.04, thickness=0.15, chord=1.2, resolution=60))
    app.show()


if __name__ == "__main__":
    main()
