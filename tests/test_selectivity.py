import pytest

import domain as dd
from fault_study import fault_study
from oc_plots import check_selectivity, fault_currents_for_selectivity


@pytest.fixture
def feeder():
    return dd.CurveSpec(dd.CurveFamily.DEFINITE, 350, 0.5)


@pytest.fixture
def incomer():
    return dd.CurveSpec(dd.CurveFamily.IEC_STANDARD_INVERSE, 500, 0.3)


def test_graded_relays_are_selective(feeder, incomer):
    result = check_selectivity(feeder, incomer, [680, 980, 1132])

    assert result.is_selective
    assert len(result.points) == 3
    assert result.min_margin >= 0.3
    assert result.failures == []


def test_margin_is_upstream_minus_downstream(feeder, incomer):
    result = check_selectivity(feeder, incomer, [1132])
    point = result.points[0]

    assert point.margin == pytest.approx(
        point.upstream.trip_time_seconds - point.downstream.trip_time_seconds
    )
    assert point.downstream.trip_time_seconds == 0.5


def test_insufficient_margin(feeder):
    fast_incomer = dd.CurveSpec(dd.CurveFamily.DEFINITE, 500, 0.6)
    result = check_selectivity(feeder, fast_incomer, [1132], margin=0.3)

    assert not result.is_selective
    assert result.points[0].margin == pytest.approx(0.1)
    assert len(result.failures) == 1


def test_upstream_only_trip_is_not_selective(incomer):
    insensitive_feeder = dd.CurveSpec(dd.CurveFamily.DEFINITE, 2000, 0.1)
    result = check_selectivity(insensitive_feeder, incomer, [1132])

    point = result.points[0]
    assert not point.is_selective
    assert point.margin is None
    assert result.min_margin is None


def test_downstream_only_trip_is_selective(feeder, incomer):
    result = check_selectivity(feeder, incomer, [400])

    assert result.is_selective
    assert not result.points[0].upstream.is_trip


def test_no_trip_currents_are_ignored(feeder, incomer):
    result = check_selectivity(feeder, incomer, [100, 200])
    assert result.points == ()
    assert result.is_selective


def test_points_are_sorted(feeder, incomer):
    result = check_selectivity(feeder, incomer, [1132, 680, 980])
    assert [p.current for p in result.points] == [680, 980, 1132]


def test_negative_margin_rejected(feeder, incomer):
    with pytest.raises(dd.InvalidSetting):
        check_selectivity(feeder, incomer, [1132], margin=-0.1)


def test_fault_currents_from_study():
    network = dd.NetworkParameters(10000, dd.Phasor(1, 5), dd.Phasor(3, 15))
    currents = fault_currents_for_selectivity(fault_study(network).values())

    assert len(currents) == 3
    assert currents == sorted(currents)
    assert currents[-1] == pytest.approx(1132.2, rel=1e-3)
