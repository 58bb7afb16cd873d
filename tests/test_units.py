from cncsim.primitives import Unit
from cncsim.units import ToolpathUnits


def test_default_is_metric():
    units = ToolpathUnits()
    assert units.linear_unit is Unit.MILLIMETER
    assert units.is_metric()
    assert not units.is_imperial()


def test_metric_strings():
    units = ToolpathUnits(Unit.MILLIMETER)
    assert units.feedrate_unit() == "mm/min"
    assert units.unit_name() == "mm"


def test_imperial_strings():
    units = ToolpathUnits(Unit.INCH)
    assert units.is_imperial()
    assert not units.is_metric()
    assert units.feedrate_unit() == "in/min"
    assert units.unit_name() == "in"


def test_spindle_speed_unit_independent_of_linear_unit():
    assert ToolpathUnits(Unit.INCH).spindle_speed_unit() == "RPM"
    assert ToolpathUnits(Unit.MILLIMETER).spindle_speed_unit() == "RPM"