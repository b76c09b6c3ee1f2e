import logging
import time
from typing import Dict, Optional

import pandas as pd

import domain as dd
import fault_study as fs
import relays
import config_logging as cl
from oc_plots import curve_sampler, plot_settings, selectivity
from save_results import save_result as sr


def default_study() -> Dict:
    """
    Return the default study inputs: a 10kV source, a definite-time feeder
    relay graded against an IEC inverse incomer, and a 200/5A star CT.
    """
    return {
        'network': dd.NetworkParameters(
            line_voltage_rms=10000,
            positive_seq_impedance=dd.Phasor(1, 5),
            zero_seq_impedance=dd.Phasor(3, 15),
            fault_resistance=0,
        ),
        'fault_type': dd.ThreePhase(),
        'main': dd.CurveSpec(dd.CurveFamily.DEFINITE, 350, 0.5),
        'backup': dd.CurveSpec(dd.CurveFamily.IEC_STANDARD_INVERSE, 500, 0.3),
        'ct': dd.CtSpec(200, 5, dd.CtConnection.STAR),
        'load_current': 100,
    }


@cl.log_arguments
def run_study(
    network: dd.NetworkParameters,
    fault_type: dd.FaultType,
    main: dd.CurveSpec,
    backup: Optional[dd.CurveSpec],
    ct: dd.CtSpec,
    load_current: float,
) -> Dict[str, pd.DataFrame]:
    """
    Run a complete single-relay study and return display tables.

    Steps:
        1. Solve the fault and every fault kind for the fault levels
        2. Evaluate the main (and backup) relay at the fault current
        3. Scale the fault and load currents through the CT
        4. Sample both curves and check their grading

    Returns:
        Dictionary of table name: DataFrame.
    """
    quantities = fs.solve_fault(network, fault_type)
    studies = fs.fault_study(network)
    levels = fs.fault_levels(network)

    fault_current = quantities.max_current
    trips = [relays.evaluate_trip(main, fault_current)]
    if backup is not None:
        trips.append(relays.evaluate_trip(backup, fault_current))

    ct_fault = relays.scale_to_secondary(ct, fault_current)
    ct_load = relays.scale_to_secondary(ct, load_current)
    pickup = relays.recommended_pickup(load_current)
    reach = relays.device_reach_factors(levels, main)

    window = plot_settings.default_chart_window(main, backup)
    tables = {
        'phases': sr.phase_quantities_frame(quantities),
        'trip': sr.trip_frame(main, trips[:1]),
        'main_curve': sr.curve_frame(
            curve_sampler.sample_curve(main, (0, window.max_current), window)
        ),
        'settings': pd.DataFrame([{
            'Recommended pickup (A)': pickup,
            'CT secondary fault (A)': ct_fault.secondary_current,
            'CT fault warning': ct_fault.warning.value if ct_fault.warning else '',
            'CT secondary load (A)': ct_load.secondary_current,
            'CT load warning': ct_load.warning.value if ct_load.warning else '',
            'Phase reach factor': reach['ph_rf'],
            'Earth reach factor': reach['ef_rf'],
        }]),
    }

    if backup is not None:
        tables['backup_trip'] = sr.trip_frame(backup, trips[1:])
        tables['backup_curve'] = sr.curve_frame(
            curve_sampler.sample_curve(backup, (0, window.max_current), window)
        )
        grading = selectivity.check_selectivity(
            main, backup,
            selectivity.fault_currents_for_selectivity(studies.values())
        )
        tables['selectivity'] = sr.selectivity_frame(grading)

    for trip in trips:
        logging.info(f"Fault current {fault_current:.0f}A: {trip}")

    return {name: sr.clean_dataframe(df) for name, df in tables.items()}


def main() -> Dict[str, pd.DataFrame]:
    """Run the default study."""
    return run_study(**default_study())


if __name__ == '__main__':
    start = time.time()

    # Configure logging
    cl.configure_logging(
        level=logging.INFO,
        filename=cl.getpath() / 'prot_calc_log.txt'
    )

    results = main()
    for name, table in results.items():
        print(f"\n{name}\n{table.to_string()}")

    end = time.time()
    run_time = round(end - start, 6)
    print(f"Script run time: {run_time} seconds")
