import logging

import pytest

from pixelpi.__main__ import build_parser, format_report, main
from pixelpi.logging_config import resolve_level, setup_logging
from pixelpi.model.estimation import estimate_pi


def test_report_for_each_radius(capsys):
    assert main(["10", "50"]) == 0
    out = capsys.readouterr().out
    assert "Radius: 10 px" in out
    assert "Radius: 50 px" in out
    assert "Theoretical perimeter:" in out
    assert "62.831853" in out


@pytest.mark.parametrize("arg", ["0", "abc", "nan", "1e9"])
def test_invalid_radius_exits_with_usage_error(arg, capsys):
    with pytest.raises(SystemExit) as exc:
        main([arg])
    assert exc.value.code == 2
    assert "pixelpi" in capsys.readouterr().err


def test_unknown_log_level_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["10", "--log-level", "chatty"])
    assert exc.value.code == 2


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.radii == []
    assert args.gui is False
    assert args.log_level == "warning"


def test_format_report_lists_all_values():
    report = format_report(estimate_pi(20))
    assert report.count("\n") == 7
    assert "Pi from area:" in report


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        resolve_level("loud")


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "pixelpi.log"
    setup_logging(level="debug", log_file=str(log_file))
    setup_logging(level="debug", log_file=str(log_file))

    logger = logging.getLogger("pixelpi")
    assert len(logger.handlers) == 2

    logging.getLogger("pixelpi.model.estimation").debug("hello from the estimator")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from the estimator" in log_file.read_text(encoding="utf-8")
