# Purpose: point shift construction, node matching and failure modes.

import logging

import numpy as np
import pytest

from ficcrisk.conventions import Tenor
from ficcrisk.curves import (
    ConstantCurve,
    CurveMetadata,
    CurveNodeMetadata,
    InterpolatedNodalCurve,
    NelsonSiegelCurve,
    ValueType,
)
from ficcrisk.scenarios import (
    ConfigurationError,
    CurvePointShift,
    CurvePointShiftBuilder,
    ScenarioError,
    ShiftType,
    UnsupportedCurveError,
)


def test_scenario_example_shifts_only_matched_node(two_node_curve):
    shift = CurvePointShift.builder(ShiftType.ABSOLUTE).add_shift("1Y", 0.001).build()

    shifted = shift.apply(two_node_curve)

    assert shifted.y_values[0] == pytest.approx(0.011)
    assert shifted.y_values[1] == 0.02


@pytest.mark.parametrize("shift_type", list(ShiftType))
def test_empty_shift_is_identity(shift_type, tenor_curve):
    shifted = CurvePointShift(shift_type, {}).apply(tenor_curve)

    np.testing.assert_array_equal(shifted.y_values, tenor_curve.y_values)
    np.testing.assert_array_equal(shifted.x_values, tenor_curve.x_values)


@pytest.mark.parametrize(
    "shift_type, amount, expected",
    [
        (ShiftType.ABSOLUTE, 0.001, 0.01 + 0.001),
        (ShiftType.RELATIVE, 0.1, 0.01 * (1 + 0.1)),
        (ShiftType.SCALED, 1.5, 0.01 * 1.5),
    ],
)
def test_shift_type_semantics(two_node_curve, shift_type, amount, expected):
    shifted = CurvePointShift(shift_type, {"1Y": amount}).apply(two_node_curve)

    assert shifted.y_values[0] == expected
    assert shifted.y_values[1] == 0.02


def test_identifier_takes_precedence_over_label():
    metadata = CurveMetadata(
        name="PRECEDENCE",
        parameters=(
            CurveNodeMetadata("node-a", "short"),
            CurveNodeMetadata("node-b", "long"),
        ),
    )
    curve = InterpolatedNodalCurve(metadata, [1.0, 2.0], [1.0, 2.0])
    shift = CurvePointShift(ShiftType.ABSOLUTE, {"node-a": 0.5, "short": 10.0})

    shifted = shift.apply(curve)

    assert list(shifted.y_values) == [1.5, 2.0]


def test_label_used_when_identifier_not_shifted(tenor_curve):
    # tenor curve identifiers are Tenor objects, labels are strings
    shift = CurvePointShift(ShiftType.ABSOLUTE, {"2Y": 0.01})

    shifted = shift.apply(tenor_curve)

    assert shifted.y_values[2] == pytest.approx(0.039)
    assert list(shifted.y_values[:2]) == list(tenor_curve.y_values[:2])
    assert list(shifted.y_values[3:]) == list(tenor_curve.y_values[3:])


def test_tenor_identifier_matches(tenor_curve):
    shift = CurvePointShift(ShiftType.ABSOLUTE, {Tenor.parse("10Y"): -0.001, "10Y": 1.0})

    shifted = shift.apply(tenor_curve)

    assert shifted.y_values[-1] == pytest.approx(0.027)


def test_unmatched_keys_are_ignored(two_node_curve):
    shifted = CurvePointShift(ShiftType.ABSOLUTE, {"30Y": 1.0}).apply(two_node_curve)

    assert list(shifted.y_values) == [0.01, 0.02]


def test_apply_does_not_mutate_inputs(two_node_curve):
    shift = CurvePointShift(ShiftType.RELATIVE, {"5Y": 0.5})
    before = two_node_curve.y_values.copy()

    shifted = shift.apply(two_node_curve)

    assert shifted is not two_node_curve
    np.testing.assert_array_equal(two_node_curve.y_values, before)
    assert dict(shift.shifts) == {"5Y": 0.5}
    assert shifted.metadata == two_node_curve.metadata


def test_missing_metadata_raises_configuration_error(curve_without_metadata):
    shift = CurvePointShift(ShiftType.ABSOLUTE, {"1Y": 0.001})

    with pytest.raises(ConfigurationError, match="NO-NODES"):
        shift.apply(curve_without_metadata)


def test_stripped_node_metadata_raises_configuration_error(two_node_curve):
    curve = two_node_curve.with_metadata(two_node_curve.metadata.without_parameters())
    shift = CurvePointShift(ShiftType.ABSOLUTE, {"1Y": 0.001})

    assert curve.metadata.parameters is None
    with pytest.raises(ConfigurationError, match="USD-TEST"):
        shift.apply(curve)


def test_metadata_checked_before_curve_type():
    curve = ConstantCurve.of("FLAT", 0.02)
    shift = CurvePointShift(ShiftType.ABSOLUTE, {})

    with pytest.raises(ConfigurationError, match="FLAT"):
        shift.apply(curve)


def test_non_nodal_curve_raises_unsupported_curve_error():
    curve = NelsonSiegelCurve("NS", 0.03, -0.01, 0.005, 2.0)
    shift = CurvePointShift(ShiftType.ABSOLUTE, {"beta0": 0.001})

    with pytest.raises(UnsupportedCurveError, match="NelsonSiegelCurve") as excinfo:
        shift.apply(curve)
    assert "'NS'" in str(excinfo.value)


def test_errors_are_value_errors():
    assert issubclass(ConfigurationError, ScenarioError)
    assert issubclass(UnsupportedCurveError, ScenarioError)
    assert issubclass(ScenarioError, ValueError)


def test_shifts_are_read_only():
    shift = CurvePointShift(ShiftType.ABSOLUTE, {"1Y": 1})

    with pytest.raises(TypeError):
        shift.shifts["1Y"] = 2.0
    assert shift.shifts["1Y"] == 1.0
    assert isinstance(shift.shifts["1Y"], float)


def test_constructor_copies_mapping():
    source = {"1Y": 0.001}
    shift = CurvePointShift(ShiftType.ABSOLUTE, source)

    source["1Y"] = 0.5
    source["2Y"] = 0.5

    assert dict(shift.shifts) == {"1Y": 0.001}


def test_shift_type_required():
    with pytest.raises(ValueError, match="shift_type"):
        CurvePointShift(None, {})
    with pytest.raises(ValueError, match="shift_type"):
        CurvePointShift.builder(None)


@pytest.mark.parametrize("make", [
    lambda: CurvePointShift("ABSOLUTE", {}),
    lambda: CurvePointShift.builder("ABSOLUTE"),
    lambda: CurvePointShiftBuilder("ABSOLUTE"),
])
def test_shift_type_must_be_enum_member(make):
    with pytest.raises(TypeError, match="ShiftType"):
        make()


def test_equality_and_hash():
    a = CurvePointShift(ShiftType.SCALED, {"1Y": 2.0, "2Y": 3.0})
    b = CurvePointShift.builder(ShiftType.SCALED).add_shifts({"2Y": 3.0, "1Y": 2.0}).build()
    c = CurvePointShift(ShiftType.ABSOLUTE, {"1Y": 2.0, "2Y": 3.0})

    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_builder_overwrite_by_call_order():
    builder = CurvePointShiftBuilder(ShiftType.ABSOLUTE)
    builder.add_shift("1Y", 1.0)
    builder.add_shifts({"1Y": 2.0, "2Y": 3.0})
    builder.add_shift("2Y", 4.0)

    shift = builder.build()

    assert shift.shift_type is ShiftType.ABSOLUTE
    assert dict(shift.shifts) == {"1Y": 2.0, "2Y": 4.0}


def test_builder_snapshot_isolation():
    builder = CurvePointShift.builder(ShiftType.RELATIVE).add_shift("1Y", 0.1)
    first = builder.build()

    builder.add_shift("1Y", 0.2).add_shift("5Y", 0.3)
    second = builder.build()

    assert dict(first.shifts) == {"1Y": 0.1}
    assert dict(second.shifts) == {"1Y": 0.2, "5Y": 0.3}


def test_builder_rejects_none_key():
    with pytest.raises(ValueError, match="key"):
        CurvePointShift.builder(ShiftType.ABSOLUTE).add_shift(None, 1.0)


def test_discount_factor_curve_point_shift():
    curve = InterpolatedNodalCurve.from_tenors(
        "DF", ["1Y", "2Y"], [0.97, 0.94], y_value_type=ValueType.DISCOUNT_FACTOR
    )
    shifted = CurvePointShift(ShiftType.SCALED, {"2Y": 0.99}).apply(curve)

    assert shifted.y_values[1] == 0.94 * 0.99
    assert shifted.metadata.y_value_type == curve.metadata.y_value_type


def test_apply_logs_matched_nodes(two_node_curve, caplog):
    shift = CurvePointShift(ShiftType.ABSOLUTE, {"1Y": 0.001})

    with caplog.at_level(logging.DEBUG, logger="ficcrisk.scenarios.point_shift"):
        shift.apply(two_node_curve)

    assert "1 of 2 nodes matched" in caplog.text


def test_non_finite_shift_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="ficcrisk.scenarios.point_shift"):
        CurvePointShift(ShiftType.ABSOLUTE, {"1Y": float("nan")})

    assert "Non-finite shift amount" in caplog.text
