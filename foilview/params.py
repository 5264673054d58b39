from dataclasses import dataclass, replace
from enum import Enum
import logging
import math

from . import config

logger = logging.getLogger(__name__)


class ParamKind(Enum):
    """Enumeration of the adjustable airfoil inputs."""

    Camber = "camber"
    Thickness = "thickness"
    Chord = "chord"
    Resolution = "resolution"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Return a human-readable display name."""
        return self.value.title()


@dataclass(frozen=True)
class ParamRange:
    minimum: float
    maximum: float
    step: float
    fmt: str  # printf style label format
    integer: bool = False

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum

    def clamp(self, value: float) -> float:
        """Bound a raw input to the range, rounding integer kinds."""
        value = min(max(float(value), self.minimum), self.maximum)
        if self.integer:
            return int(round(value))
        return value

    def format(self, value: float) -> str:
        return self.fmt % value


PARAM_RANGES: dict[ParamKind, ParamRange] = {
    ParamKind.Camber: ParamRange(
        config.CAMBER_MIN, config.CAMBER_MAX, config.CAMBER_STEP, config.CAMBER_FMT
    ),
    ParamKind.Thickness: ParamRange(
        config.THICKNESS_MIN,
        config.THICKNESS_MAX,
        config.THICKNESS_STEP,
        config.THICKNESS_FMT,
    ),
    ParamKind.Chord: ParamRange(
        config.CHORD_MIN, config.CHORD_MAX, config.CHORD_STEP, config.CHORD_FMT
    ),
    ParamKind.Resolution: ParamRange(
        config.RESOLUTION_MIN,
        config.RESOLUTION_MAX,
        config.RESOLUTION_STEP,
        config.RESOLUTION_FMT,
        integer=True,
    ),
}


@dataclass(frozen=True)
class FoilParams:
    camber: float = config.CAMBER_DEFAULT  # Max camber, fraction of chord
    thickness: float = config.THICKNESS_DEFAULT  # Max thickness, fraction of chord
    chord: float = config.CHORD_DEFAULT  # Chord length
    resolution: int = config.RESOLUTION_DEFAULT  # Number of chordwise stations
    camber_position: float = config.CAMBER_POSITION

    def __post_init__(self):
        if isinstance(self.resolution, bool) or int(self.resolution) != self.resolution:
            raise ValueError(
                f"resolution must be an integer. Actual value: {self.resolution}"
            )
        object.__setattr__(self, "resolution", int(self.resolution))

        # Slider bounds are applied by with_param; the record only guards the
        # domain of the formulas.
        if self.resolution < 1:
            raise ValueError(
                f"resolution must be >= 1. Actual value: {self.resolution}"
            )
        if not self.chord > 0:
            raise ValueError(f"chord must be > 0. Actual value: {self.chord}")
        for name in ("camber", "thickness"):
            value = getattr(self, name)
            if not value >= 0:
                raise ValueError(f"{name} must be >= 0. Actual value: {value}")

        if not 0 < self.camber_position < 1:
            raise ValueError(
                f"camber_position must be within (0, 1). "
                f"Actual value: {self.camber_position}"
            )

    def get(self, kind: ParamKind) -> float:
        return getattr(self, kind.value)

    def with_param(self, kind: ParamKind | str, value: float) -> "FoilParams":
        """Create new parameters with one input replaced, clamped to its range."""
        kind = ParamKind(kind)
        rng = PARAM_RANGES[kind]
        clamped = rng.clamp(value)
        if clamped != value:
            logger.warning("Clamped %s from %r to %r", kind, value, clamped)
        return replace(self, **{kind.value: clamped})

    def label(self, kind: ParamKind) -> str:
        """Label text for one input at its fixed precision."""
        return PARAM_RANGES[kind].format(self.get(kind))

    @property
    def designation(self) -> str:
        """NACA 4-digit name, e.g. 'NACA 2412'.

        Percentages are rounded half up. Camber and position are single
        digits, so camber above 9 % of chord is reported as 9.
        """
        m = min(_round_half_up(self.camber * 100), 9)
        p = min(_round_half_up(self.camber_position * 10), 9) if m else 0
        t = min(_round_half_up(self.thickness * 100), 99)
        return f"NACA {m}{p}{t:02d}"


def _round_half_up(value: float) -> int:
    # Offset absorbs binary error such as 0.145 * 100 = 14.499999999999998
    return int(math.floor(value + 0.5 + 1e-9))
