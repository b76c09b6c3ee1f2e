import math

import pytest

import domain as dd
from fault_study import solve_fault, phase_voltage
from relays import sequence_components


@pytest.fixture
def network():
    return dd.NetworkParameters(
        line_voltage_rms=10000,
        positive_seq_impedance=dd.Phasor(1, 5),
        zero_seq_impedance=dd.Phasor(3, 15),
        fault_resistance=0,
    )


def _angle_between(p, q):
    """Angle of p relative to q, wrapped to (-180, 180]."""
    diff = (p.angle_degrees - q.angle_degrees) % 360
    return diff - 360 if diff > 180 else diff


def test_three_phase_scenario(network):
    pq = solve_fault(network, dd.ThreePhase())

    assert phase_voltage(10000) == pytest.approx(5773.5, rel=1e-4)
    assert pq.ia.magnitude == pytest.approx(1132.0, rel=0.01)
    assert pq.ia.angle_degrees == pytest.approx(-78.7, abs=0.1)
    # Solid fault: no voltage left at the fault point
    for u in pq.voltages:
        assert u.magnitude == pytest.approx(0, abs=1e-6)


@pytest.mark.parametrize("z1, rf", [
    (dd.Phasor(1, 5), 0),
    (dd.Phasor(0.2, 0.9), 2.5),
    (dd.Phasor(0, 12), 0.1),
    (dd.Phasor(0, 0), 4),
])
def test_three_phase_symmetry(z1, rf):
    network = dd.NetworkParameters(11000, z1, dd.Phasor(1, 1), rf)
    pq = solve_fault(network, dd.ThreePhase())

    for ia, ib, ic in (pq.currents, pq.voltages):
        assert ib.magnitude == pytest.approx(ia.magnitude, abs=1e-6)
        assert ic.magnitude == pytest.approx(ia.magnitude, abs=1e-6)
        if ia.magnitude > 1e-6:
            assert _angle_between(ib, ia) == pytest.approx(-120, abs=1e-6)
            assert _angle_between(ic, ia) == pytest.approx(120, abs=1e-6)


def test_three_phase_fault_resistance_voltage():
    network = dd.NetworkParameters(10000, dd.Phasor(1, 5), dd.Phasor(3, 15), 2)
    pq = solve_fault(network, dd.ThreePhase())

    # Voltage drop across the source leaves Ia * Rf at the fault point
    assert pq.ua.is_close(pq.ia * 2, tol=1e-6)


def test_single_phase_to_ground_scenario(network):
    three_phase = solve_fault(network, dd.ThreePhase())
    pq = solve_fault(network, dd.SinglePhaseToGround(dd.Phase.A))

    assert pq.ib.magnitude == 0
    assert pq.ic.magnitude == 0
    assert pq.ia.magnitude < three_phase.ia.magnitude
    # 3 * 5773.5 / |(5, 25)|
    assert pq.ia.magnitude == pytest.approx(3 * 5773.5 / math.hypot(5, 25), rel=1e-4)
    # Solid fault: faulted phase voltage collapses
    assert pq.ua.magnitude == pytest.approx(0, abs=1e-9)


def test_single_phase_to_ground_sequence_currents(network):
    pq = solve_fault(network, dd.SinglePhaseToGround())
    i0, i1, i2 = sequence_components(*pq.currents)

    assert i0.is_close(i1, tol=1e-6)
    assert i1.is_close(i2, tol=1e-6)


def test_single_phase_to_ground_voltages():
    network = dd.NetworkParameters(10000, dd.Phasor(1, 5), dd.Phasor(3, 15), 10)
    pq = solve_fault(network, dd.SinglePhaseToGround())

    i012 = pq.ia.scale(1 / 3)
    vn = -(i012 * dd.Phasor(3, 15))
    va = dd.Phasor(phase_voltage(10000))

    assert pq.ua.is_close(i012 * 30, tol=1e-6)
    assert pq.ub.is_close(va * dd.A2 + vn, tol=1e-6)
    assert pq.uc.is_close(va * dd.A + vn, tol=1e-6)


@pytest.mark.parametrize("phase", list(dd.Phase))
def test_single_phase_to_ground_any_phase(network, phase):
    reference = solve_fault(network, dd.SinglePhaseToGround(dd.Phase.A))
    pq = solve_fault(network, dd.SinglePhaseToGround(phase))

    currents = dict(zip(dd.PHASE_ORDER, pq.currents))
    assert currents[phase].magnitude == pytest.approx(reference.ia.magnitude)
    for other in dd.PHASE_ORDER:
        if other != phase:
            assert currents[other].magnitude == 0

    # Faulted phase current lags its own pre-fault voltage by the same angle
    shift = -120 * dd.phase_shift(phase)
    expected = (reference.ia.angle_degrees + shift + 180) % 360 - 180
    assert currents[phase].angle_degrees == pytest.approx(expected, abs=1e-6)


def test_phase_to_phase_scenario(network):
    pq = solve_fault(network, dd.PhaseToPhase((dd.Phase.B, dd.Phase.C)))

    assert pq.ia.magnitude == 0
    assert pq.ib.is_close(-pq.ic, tol=1e-6)
    # |Ib| = √3 * Vph / |2 * Z1|
    expected = math.sqrt(3) * 5773.5 / math.hypot(2, 10)
    assert pq.ib.magnitude == pytest.approx(expected, rel=1e-4)
    # Healthy phase keeps the source voltage
    assert pq.ua.is_close(dd.Phasor(phase_voltage(10000)), tol=1e-9)


def test_phase_to_phase_has_no_zero_sequence(network):
    pq = solve_fault(network, dd.PhaseToPhase())
    i0, i1, i2 = sequence_components(*pq.currents)

    assert i0.magnitude == pytest.approx(0, abs=1e-9)
    assert i2.is_close(-i1, tol=1e-6)


def test_phase_to_phase_solid_fault_voltages(network):
    pq = solve_fault(network, dd.PhaseToPhase())

    # Faulted phases collapse onto the same voltage
    assert pq.ub.is_close(pq.uc, tol=1e-6)


@pytest.mark.parametrize("pair, healthy", [
    ((dd.Phase.A, dd.Phase.B), dd.Phase.C),
    ((dd.Phase.C, dd.Phase.A), dd.Phase.B),
    ((dd.Phase.C, dd.Phase.B), dd.Phase.A),
])
def test_phase_to_phase_any_pair(network, pair, healthy):
    reference = solve_fault(network, dd.PhaseToPhase())
    pq = solve_fault(network, dd.PhaseToPhase(pair))

    currents = dict(zip(dd.PHASE_ORDER, pq.currents))
    assert currents[healthy].magnitude == 0
    assert currents[pair[0]].is_close(-currents[pair[1]], tol=1e-6)
    assert currents[pair[0]].magnitude == pytest.approx(reference.ib.magnitude)


def test_zero_loop_impedance_is_reported():
    network = dd.NetworkParameters(10000, dd.Phasor(0, 0), dd.Phasor(0, 0), 0)

    for fault in (dd.ThreePhase(), dd.PhaseToPhase(), dd.SinglePhaseToGround()):
        with pytest.raises(dd.DivisionByZero):
            solve_fault(network, fault)


def test_cancelling_reactances_are_reported():
    # Z1 + Z2 + Z0 = 0 with capacitive zero sequence
    network = dd.NetworkParameters(10000, dd.Phasor(0, 5), dd.Phasor(0, -10), 0)

    with pytest.raises(dd.DivisionByZero):
        solve_fault(network, dd.SinglePhaseToGround())


def test_unknown_fault_type(network):
    with pytest.raises(TypeError):
        solve_fault(network, "ABC")
