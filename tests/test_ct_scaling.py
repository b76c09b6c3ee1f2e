import math

import pytest

import domain as dd
from relays import scale_to_secondary, scale_to_primary, classify_secondary


def test_delta_scenario():
    ct = dd.CtSpec(200, 5, dd.CtConnection.DELTA)
    result = scale_to_secondary(ct, 100)

    assert ct.ratio == 40
    assert result.secondary_current == pytest.approx(2.5 * math.sqrt(3))
    assert result.secondary_current == pytest.approx(4.33, abs=1e-2)
    assert result.warning is None


@pytest.mark.parametrize("primary", [0.5, 37, 100, 180, 5000])
def test_delta_is_root_three_times_star(primary):
    star = scale_to_secondary(dd.CtSpec(200, 5, dd.CtConnection.STAR), primary)
    delta = scale_to_secondary(dd.CtSpec(200, 5, dd.CtConnection.DELTA), primary)

    assert delta.secondary_current == pytest.approx(
        star.secondary_current * math.sqrt(3), rel=1e-12
    )


@pytest.mark.parametrize("primary", [1, 100, 333.3, 1132])
def test_star_ratio_round_trip(primary):
    ct = dd.CtSpec(600, 1)
    secondary = scale_to_secondary(ct, primary).secondary_current

    assert secondary * ct.ratio == pytest.approx(primary)
    assert scale_to_primary(ct, secondary) == pytest.approx(primary)


def test_delta_round_trip():
    ct = dd.CtSpec(200, 5, dd.CtConnection.DELTA)
    secondary = scale_to_secondary(ct, 100).secondary_current
    assert scale_to_primary(ct, secondary) == pytest.approx(100)


@pytest.mark.parametrize("primary, warning", [
    (0, dd.CtWarning.MEASUREMENT_FLOOR),
    (9, dd.CtWarning.MEASUREMENT_FLOOR),   # 0.225A < 0.25A
    (10, None),                            # 0.25A, on the floor
    (200, None),                           # rated
    (240, None),                           # 120 %, on the limit
    (241, dd.CtWarning.SATURATION_RISK),
    (1132, dd.CtWarning.SATURATION_RISK),
])
def test_advisory_warnings(primary, warning):
    ct = dd.CtSpec(200, 5)
    result = scale_to_secondary(ct, primary)

    assert result.warning == warning
    assert result.secondary_current == pytest.approx(primary / 40)


def test_warning_is_logged(caplog):
    with caplog.at_level("WARNING"):
        scale_to_secondary(dd.CtSpec(200, 5), 1132)
    assert "saturation" in caplog.text.lower()


def test_classify_uses_secondary_rating():
    ct = dd.CtSpec(100, 1)
    assert classify_secondary(ct, 0.04) == dd.CtWarning.MEASUREMENT_FLOOR
    assert classify_secondary(ct, 0.5) is None
    assert classify_secondary(ct, 1.3) == dd.CtWarning.SATURATION_RISK


@pytest.mark.parametrize("primary_rated, secondary_rated, field", [
    (0, 5, "primary_rated"),
    (200, 0, "secondary_rated"),
    (-200, 5, "primary_rated"),
])
def test_invalid_ct_ratings(primary_rated, secondary_rated, field):
    with pytest.raises(dd.InvalidSetting) as err:
        dd.CtSpec(primary_rated, secondary_rated)
    assert err.value.field == field


def test_negative_currents_rejected():
    ct = dd.CtSpec(200, 5)
    with pytest.raises(dd.InvalidInput):
        scale_to_secondary(ct, -1)
    with pytest.raises(dd.InvalidInput):
        scale_to_primary(ct, -1)
