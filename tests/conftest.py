from datetime import date

import pytest

from ficcrisk.curves import CurveMetadata, CurveNodeMetadata, InterpolatedNodalCurve


@pytest.fixture
def two_node_curve():
    """Two nodes keyed "1Y" and "5Y" at 1% and 2%."""
    metadata = CurveMetadata(
        name="USD-TEST",
        parameters=(
            CurveNodeMetadata.of("1Y"),
            CurveNodeMetadata.of("5Y"),
        ),
    )
    return InterpolatedNodalCurve(metadata, [1.0, 5.0], [0.01, 0.02])


@pytest.fixture
def tenor_curve():
    return InterpolatedNodalCurve.from_tenors(
        "EUR-ESTR",
        ["6M", "1Y", "2Y", "5Y", "10Y"],
        [0.030, 0.031, 0.029, 0.027, 0.028],
    )


@pytest.fixture
def dated_tenor_curve():
    return InterpolatedNodalCurve.from_tenors(
        "EUR-ESTR-DATED",
        ["1Y", "2Y", "5Y"],
        [0.030, 0.029, 0.027],
        reference_date=date(2024, 1, 2),
    )


@pytest.fixture
def curve_without_metadata():
    return InterpolatedNodalCurve(CurveMetadata(name="NO-NODES"), [1.0, 2.0, 3.0], [0.01, 0.02, 0.03])
