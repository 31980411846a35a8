"""Colour-mapping policies for the incidence heatmaps.

A policy is either linear (one ramp between two anchor colours) or segmented
(several ramps laid end to end over the value domain). Ramp positions are
fractions of the domain, so the same policy works for any incidence range.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union
from matplotlib.colors import Colormap, LinearSegmentedColormap, to_rgb

Limits = Optional[Tuple[float, float]]


def check_limits(limits: Limits) -> None:
    if limits is not None and not limits[0] <= limits[1]:
        raise ValueError(f"Limits {limits} must satisfy vmin <= vmax.")


@dataclass(frozen=True)
class ColorRamp:
    """Linear blend from `color_from` to `color_to` over [start, end]."""
    start: float
    end: float
    color_from: str
    color_to: str


@dataclass(frozen=True)
class LinearPolicy:
    low: str
    high: str
    limits: Limits = None

    def __post_init__(self) -> None:
        check_limits(self.limits)

    def to_colormap(self, name: str = "linear") -> Colormap:
        return LinearSegmentedColormap.from_list(name, [self.low, self.high])


@dataclass(frozen=True)
class SegmentedPolicy:
    """Concatenated ramps; colour may jump where two ramps meet."""
    ramps: Tuple[ColorRamp, ...]
    limits: Limits = None

    def __post_init__(self) -> None:
        # accept lists for convenience but store a hashable tuple
        object.__setattr__(self, "ramps", tuple(self.ramps))
        if not self.ramps:
            raise ValueError("A segmented policy needs at least one ramp.")
        if self.ramps[0].start != 0.0 or self.ramps[-1].end != 1.0:
            raise ValueError("Ramps must start at 0.0 and end at 1.0.")
        for ramp in self.ramps:
            if not ramp.start < ramp.end:
                raise ValueError(f"Ramp {ramp} must have start < end.")
        for left, right in zip(self.ramps, self.ramps[1:]):
            if left.end != right.start:
                raise ValueError(f"Ramps {left} and {right} are not contiguous.")
        check_limits(self.limits)

    def boundaries(self) -> List[float]:
        return [r.start for r in self.ramps] + [1.0]

    def to_colormap(self, name: str = "segmented") -> Colormap:
        # segmentdata rows are (x, colour left of x, colour right of x)
        points: List[Tuple[float, Tuple[float, ...], Tuple[float, ...]]] = []
        first = to_rgb(self.ramps[0].color_from)
        points.append((0.0, first, first))
        for left, right in zip(self.ramps, self.ramps[1:]):
            points.append((left.end, to_rgb(left.color_to), to_rgb(right.color_from)))
        last = to_rgb(self.ramps[-1].color_to)
        points.append((1.0, last, last))

        cdict: Dict[str, List[Tuple[float, float, float]]] = {}
        for i, channel in enumerate(("red", "green", "blue")):
            cdict[channel] = [(x, y0[i], y1[i]) for x, y0, y1 in points]
        return LinearSegmentedColormap(name, cdict)


ColorPolicy = Union[LinearPolicy, SegmentedPolicy]

LINEAR_POLICY = LinearPolicy(low="#fff7ec", high="#7f0000")

# Hand-picked split: a long cool ramp for the bulk of the range, then a short
# warm ramp so only the worst years turn hot.
WSJ_SPLIT: float = 0.7
WSJ_POLICY = SegmentedPolicy(ramps=(
    ColorRamp(0.0, WSJ_SPLIT, "#e7f0fa", "#0099dc"),
    ColorRamp(WSJ_SPLIT, 1.0, "#eec73a", "#ce472e"),
))
