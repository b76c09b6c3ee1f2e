import logging

import pytest

import config_logging as cl
import domain as dd
import start


def test_default_study_tables():
    tables = start.main()

    assert set(tables) == {
        'phases', 'trip', 'main_curve', 'settings',
        'backup_trip', 'backup_curve', 'selectivity',
    }
    assert tables['phases'].loc['A', 'I (A)'] == pytest.approx(1132.2, abs=0.1)
    assert tables['trip'].loc[0, 'Time (s)'] == 0.5
    assert tables['selectivity']['Selective'].all()
    assert tables['settings'].loc[0, 'CT fault warning'] == dd.CtWarning.SATURATION_RISK.value
    assert tables['settings'].loc[0, 'Recommended pickup (A)'] == pytest.approx(352.941)


def test_study_without_backup():
    inputs = start.default_study()
    inputs['backup'] = None
    inputs['fault_type'] = dd.parse_fault_code('BN')

    tables = start.run_study(**inputs)

    assert 'selectivity' not in tables
    assert tables['phases'].loc['A', 'I (A)'] == 0


def test_run_study_logs_arguments(caplog):
    with caplog.at_level(logging.INFO):
        start.main()
    assert "Function run_study called with arguments" in caplog.text


def test_getpath_creates_folder(tmp_path):
    path = cl.getpath("Results", base=tmp_path)
    assert path == tmp_path / "Results"
    assert path.is_dir()


def test_configure_logging_writes_file(tmp_path):
    log_file = tmp_path / 'run.log'
    cl.configure_logging(level=logging.DEBUG, filename=log_file)
    try:
        logging.debug("solver check")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "DEBUG - solver check" in log_file.read_text()
    finally:
        for handler in logging.getLogger().handlers[:]:
            handler.close()
            logging.getLogger().removeHandler(handler)
        logging.getLogger().setLevel(logging.WARNING)


def test_log_arguments_preserves_name():
    @cl.log_arguments
    def add(a, b=1):
        return a + b

    assert add.__name__ == 'add'
    assert add(2, b=3) == 5
