import pytest

import domain as dd
from fault_study import solve_fault
from relays import (
    sequence_components,
    get_measured_current,
    convert_to_i0,
    convert_to_i2,
)


@pytest.fixture
def network():
    return dd.NetworkParameters(10000, dd.Phasor(1, 5), dd.Phasor(3, 15), 0)


def test_balanced_set_is_pure_positive_sequence():
    ia = dd.Phasor.from_polar(100, -30)
    i0, i1, i2 = sequence_components(ia, ia * dd.A2, ia * dd.A)

    assert i0.magnitude == pytest.approx(0, abs=1e-9)
    assert i2.magnitude == pytest.approx(0, abs=1e-9)
    assert i1.is_close(ia, tol=1e-9)


def test_earth_fault_measurements(network):
    pq = solve_fault(network, dd.SinglePhaseToGround())

    assert convert_to_i0(pq, threei0=True) == pytest.approx(pq.ia.magnitude)
    assert convert_to_i0(pq) == pytest.approx(pq.ia.magnitude / 3)
    assert get_measured_current('3I0', pq) == pytest.approx(pq.ia.magnitude)
    assert get_measured_current('I0', pq) == pytest.approx(pq.ia.magnitude / 3)
    assert get_measured_current('I2', pq) == pytest.approx(pq.ia.magnitude / 3)


def test_phase_fault_measurements(network):
    pq = solve_fault(network, dd.PhaseToPhase())

    assert get_measured_current('3ph', pq) == pytest.approx(pq.ib.magnitude)
    assert get_measured_current('1ph', pq) == 0
    assert convert_to_i0(pq) == pytest.approx(0, abs=1e-9)
    # |I2| = |Ib| / √3 for a phase-phase fault
    assert convert_to_i2(pq) == pytest.approx(pq.ib.magnitude / 3 ** 0.5)
    assert get_measured_current('3I2', pq) == pytest.approx(3 * convert_to_i2(pq))


def test_three_phase_has_no_negative_sequence(network):
    pq = solve_fault(network, dd.ThreePhase())
    assert convert_to_i2(pq) == pytest.approx(0, abs=1e-6)
    assert get_measured_current('d3m', pq) == pytest.approx(pq.ia.magnitude)


def test_unknown_measurement_type(network):
    pq = solve_fault(network, dd.ThreePhase())
    with pytest.raises(dd.InvalidInput):
        get_measured_current('Ixyz', pq)
