"""
Tests for the command-line entry point.
"""

import json
import logging

import matplotlib.pyplot as plt
import pytest

from springconstant import config
from springconstant.__main__ import build_parser, main
from springconstant.logging_config import setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("springconstant")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    plt.close("all")


def test_no_plot_run(caplog):
    with caplog.at_level(logging.INFO, logger="springconstant"):
        assert main(["--no-plot"]) == 0

    assert "k(T0 = 20 °C) = 4e+07 N/m" in caplog.text
    assert "T = -80 °C" in caplog.text


def test_saves_both_figures(tmp_path):
    assert main(["--output-dir", str(tmp_path), "--log-level", "WARNING"]) == 0

    assert (tmp_path / config.TEMPERATURE_FIGURE_NAME).exists()
    assert (tmp_path / config.TIME_FIGURE_NAME).exists()


def test_output_dir_defaults_to_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    args = build_parser().parse_args(["--output-dir"])

    assert args.output_dir == str(tmp_path / config.OUTPUT_FOLDER_NAME)


def test_bare_output_dir_saves_under_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert main(["--output-dir", "--log-level", "WARNING"]) == 0

    assert (tmp_path / config.OUTPUT_FOLDER_NAME / config.TIME_FIGURE_NAME).exists()


def test_unwritable_output_dir_exits_with_2(tmp_path, caplog):
    # A regular file where the output folder should be
    blocker = tmp_path / "figures"
    blocker.write_text("not a folder", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="springconstant"):
        assert main(["--output-dir", str(blocker)]) == 2

    assert "Could not save figures" in caplog.text
    assert plt.get_fignums() == []


def test_parameter_file(tmp_path, caplog):
    path = tmp_path / "params.json"
    path.write_text(json.dumps({"E0": 100e9}), encoding="utf-8")

    with caplog.at_level(logging.INFO, logger="springconstant"):
        assert main(["--params", str(path), "--no-plot"]) == 0

    assert "k(T0 = 20 °C) = 2e+07 N/m" in caplog.text


def test_invalid_parameter_file_exits_with_2(tmp_path, caplog):
    path = tmp_path / "params.json"
    path.write_text(json.dumps({"L0": -1.0}), encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="springconstant"):
        assert main(["--params", str(path), "--no-plot"]) == 2

    assert "L0" in caplog.text


def test_domain_error_exits_with_2(tmp_path, caplog):
    # Area vanishes at -30 °C, inside the reference sweep
    path = tmp_path / "params.json"
    path.write_text(json.dumps({"alpha": 0.01}), encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="springconstant"):
        assert main(["--params", str(path), "--no-plot"]) == 2

    assert "valid domain" in caplog.text


def test_log_file(tmp_path):
    log_file = tmp_path / "run.log"

    assert main(["--no-plot", "--log-file", str(log_file)]) == 0

    assert "k(T0" in log_file.read_text(encoding="utf-8")


def test_setup_logging_does_not_duplicate_handlers():
    setup_logging()
    logger = setup_logging(level=logging.DEBUG)

    assert logger.name == "springconstant"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_setup_logging_short_format(capsys):
    logger = setup_logging(log_format="short")
    logger.info("hello")

    assert capsys.readouterr().out.strip().endswith("INFO: hello")


def test_setup_logging_rejects_unknown_format():
    with pytest.raises(ValueError, match="verbose"):
        setup_logging(log_format="verbose")


def test_setup_logging_propagate_flag():
    assert setup_logging(propagate=False).propagate is False
    assert setup_logging().propagate is True


def test_log_format_option(tmp_path):
    log_file = tmp_path / "run.log"

    assert main(["--no-plot", "--log-format", "short", "--log-file", str(log_file)]) == 0

    assert log_file.read_text(encoding="utf-8").startswith("INFO: ")
