import pytest

from grafboard.axis import (
    Axis,
    FieldConfig,
    PlacementMode,
    ScaleMode,
    decimals,
    label,
    maximum,
    minimum,
    placement,
    scale,
    soft_max,
    soft_min,
    unit,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (PlacementMode.HIDDEN, "hidden"),
        (PlacementMode.AUTO, "auto"),
        (PlacementMode.LEFT, "left"),
        (PlacementMode.RIGHT, "right"),
    ],
)
def test_axis_placement_can_be_configured(value, expected):
    cfg = FieldConfig()
    Axis(cfg, placement(value))

    assert cfg.defaults.custom.axis_placement == expected


@pytest.mark.parametrize(
    "value, expected_type, expected_log",
    [
        (ScaleMode.LINEAR, "linear", 0),
        (ScaleMode.LOG2, "log", 2),
        (ScaleMode.LOG10, "log", 10),
    ],
)
def test_axis_scale_can_be_configured(value, expected_type, expected_log):
    cfg = FieldConfig()
    Axis(cfg, scale(value))

    assert cfg.defaults.custom.scale_distribution.type == expected_type
    assert cfg.defaults.custom.scale_distribution.log == expected_log


def test_axis_soft_min_can_be_configured():
    cfg = FieldConfig()
    Axis(cfg, soft_min(0))

    assert cfg.defaults.custom.axis_soft_min == 0


def test_axis_soft_max_can_be_configured():
    cfg = FieldConfig()
    Axis(cfg, soft_max(0))

    assert cfg.defaults.custom.axis_soft_max == 0


def test_axis_min_can_be_configured():
    cfg = FieldConfig()
    Axis(cfg, minimum(0))

    assert cfg.defaults.min == 0


def test_axis_max_can_be_configured():
    cfg = FieldConfig()
    Axis(cfg, maximum(0))

    assert cfg.defaults.max == 0


def test_label_can_be_configured():
    cfg = FieldConfig()
    Axis(cfg, label("Foo"))

    assert cfg.defaults.custom.axis_label == "Foo"


def test_decimals_can_be_configured():
    cfg = FieldConfig()
    Axis(cfg, decimals(2))

    assert cfg.defaults.decimals == 2


def test_unit_can_be_configured():
    cfg = FieldConfig()
    Axis(cfg, unit("reqps"))

    assert cfg.defaults.unit == "reqps"


def test_axis_modifies_the_given_field_config():
    cfg = FieldConfig()
    result = Axis(cfg, unit("reqps"), decimals(2))

    assert result.field_config is cfg
    assert cfg.defaults.unit == "reqps"
    assert cfg.defaults.decimals == 2