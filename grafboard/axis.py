"""Axis configuration of field-config based visualisations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable

Option = Callable[["Axis"], None]


class PlacementMode(str, Enum):
    """Where the axis is displayed."""

    HIDDEN = "hidden"
    AUTO = "auto"
    LEFT = "left"
    RIGHT = "right"


class ScaleMode(IntEnum):
    """How values are distributed along the axis."""

    LINEAR = 0
    LOG2 = 1
    LOG10 = 2


@dataclass
class ScaleDistribution:
    """Scale type of an axis; ``log`` is the base for logarithmic scales."""

    type: str = "linear"
    log: int = 0


@dataclass
class CustomFieldConfig:
    """Visualisation-specific field settings."""

    line_width: int = 0
    fill_opacity: int = 0
    point_size: int = 0
    line_interpolation: str = ""
    draw_style: str = ""
    line_style: dict[str, str] = field(default_factory=dict)
    bar_alignment: int = 0
    gradient_mode: str = ""
    axis_placement: str = ""
    axis_soft_min: int | None = None
    axis_soft_max: int | None = None
    axis_label: str = ""
    scale_distribution: ScaleDistribution = field(default_factory=ScaleDistribution)


@dataclass
class FieldDefaults:
    """Default settings applied to every field."""

    unit: str = ""
    decimals: int | None = None
    min: int | None = None
    max: int | None = None
    custom: CustomFieldConfig = field(default_factory=CustomFieldConfig)


@dataclass
class FieldConfig:
    """Field configuration of a panel."""

    defaults: FieldDefaults = field(default_factory=FieldDefaults)


class Axis:
    """An axis, configured in place on a field configuration."""

    def __init__(self, field_config: FieldConfig, *options: Option) -> None:
        self.field_config = field_config
        for opt in options:
            opt(self)


def placement(placement: PlacementMode) -> Option:
    """Set where the axis is placed in the panel."""

    def apply(axis: Axis) -> None:
        axis.field_config.defaults.custom.axis_placement = PlacementMode(placement).value

    return apply


def soft_min(value: int) -> Option:
    """Set a soft minimum value for the axis."""

    def apply(axis: Axis) -> None:
        axis.field_config.defaults.custom.axis_soft_min = value

    return apply


def soft_max(value: int) -> Option:
    """Set a soft maximum value for the axis."""

    def apply(axis: Axis) -> None:
        axis.field_config.defaults.custom.axis_soft_max = value

    return apply


def minimum(value: int) -> Option:
    """Set a hard minimum value for the axis."""

    def apply(axis: Axis) -> None:
        axis.field_config.defaults.min = value

    return apply


def maximum(value: int) -> Option:
    """Set a hard maximum value for the axis."""

    def apply(axis: Axis) -> None:
        axis.field_config.defaults.max = value

    return apply


def unit(unit: str) -> Option:
    """Set the unit of the displayed data."""

    def apply(axis: Axis) -> None:
        axis.field_config.defaults.unit = unit

    return apply


_SCALES = {
    ScaleMode.LINEAR: ("linear", 0),
    ScaleMode.LOG2: ("log", 2),
    ScaleMode.LOG10: ("log", 10),
}


def scale(mode: ScaleMode) -> Option:
    """Set the scale used for the axis values."""

    def apply(axis: Axis) -> None:
        scale_type, log = _SCALES.get(mode, ("linear", 0))
        axis.field_config.defaults.custom.scale_distribution = ScaleDistribution(
            type=scale_type, log=log
        )

    return apply


def label(label: str) -> Option:
    """Set the axis text label."""

    def apply(axis: Axis) -> None:
        axis.field_config.defaults.custom.axis_label = label

    return apply


def decimals(decimals: int) -> Option:
    """Set how many decimals are displayed."""

    def apply(axis: Axis) -> None:
        axis.field_config.defaults.decimals = decimals

    return apply