import io

import pytest

from designlab.patterns.logger import LogLevel, Logger, format_record, main, run_demo


def test_format_record_error_uses_single_space():
    assert format_record(LogLevel.ERROR, "x") == "0 : x"


@pytest.mark.parametrize("level", [LogLevel.ERROR, LogLevel.WARNING, LogLevel.INFO, LogLevel.DEBUG])
def test_shallow_levels_share_single_space_padding(level):
    record = format_record(level, "msg")
    assert record == f"{int(level)} : msg"


def test_deeper_levels_indent_four_more_each():
    d1 = format_record(LogLevel.DEBUG1, "m")
    d2 = format_record(LogLevel.DEBUG2, "m")
    d3 = format_record(LogLevel.DEBUG3, "m")
    assert len(d2) - len(d1) == 4
    assert len(d3) - len(d2) == 4
    assert d1.endswith("m")
    assert d1.startswith("4 :")


def test_enabled_compares_with_threshold():
    logger = Logger(LogLevel.DEBUG1, io.StringIO())
    assert logger.enabled(LogLevel.ERROR)
    assert logger.enabled(LogLevel.DEBUG1)
    assert not logger.enabled(LogLevel.DEBUG2)


def test_log_writes_concatenated_arguments():
    stream = io.StringIO()
    logger = Logger(LogLevel.DEBUG2, stream)
    record = logger.log(LogLevel.INFO, "foo ", "bar ", "baz")
    assert record == format_record(LogLevel.INFO, "foo bar baz")
    assert stream.getvalue() == record + "\n"


def test_log_filtered_level_writes_nothing():
    stream = io.StringIO()
    logger = Logger(LogLevel.INFO, stream)
    assert logger.log(LogLevel.DEBUG, "hidden") is None
    assert stream.getvalue() == ""


def test_run_demo_at_debug2_writes_all_records():
    stream = io.StringIO()
    run_demo(Logger(LogLevel.DEBUG2, stream))
    lines = stream.getvalue().splitlines()
    assert len(lines) == 8
    assert lines[0] == format_record(LogLevel.INFO, "foo bar baz")
    assert lines[1] == format_record(LogLevel.DEBUG, "A loop with 3 iterations")


def test_run_demo_at_debug1_drops_debug2_records():
    stream = io.StringIO()
    run_demo(Logger(LogLevel.DEBUG1, stream))
    lines = stream.getvalue().splitlines()
    assert all(not line.startswith("5 :") for line in lines)
    assert sum("the counter i = " in line for line in lines) == 3


def test_default_stream_is_stderr(capsys):
    Logger(LogLevel.DEBUG2).log(LogLevel.WARNING, "careful")
    captured = capsys.readouterr()
    assert captured.err == format_record(LogLevel.WARNING, "careful") + "\n"
    assert captured.out == ""


def test_main_returns_zero_and_logs(capsys):
    assert main() == 0
    assert "foo bar baz" in capsys.readouterr().err