import io

import pytest

from designlab.patterns.adapter import (
    English,
    German,
    Language,
    LanguageAdapter,
    convert_logs,
    main,
)
from designlab.patterns.logger import LogLevel, Logger, format_record


def _logger(level=LogLevel.DEBUG2):
    return Logger(level, io.StringIO())


def test_language_is_abstract():
    with pytest.raises(TypeError):
        Language()


def test_english_write_record():
    english = English(_logger())
    assert english.write() == format_record(
        LogLevel.DEBUG1, " I am English, Standard language logs.\n"
    )


def test_adapter_forwards_to_german():
    logger = _logger()
    german = German(logger)
    adapter = LanguageAdapter(german)
    assert adapter.write() == german.write()
    assert adapter.standard_timings() == german.standard_timings()


def test_adapter_is_a_language():
    adapter = LanguageAdapter(German(_logger()))
    assert isinstance(adapter, Language)
    assert "German" in adapter.write()


def test_convert_logs_returns_both_records():
    german = German(_logger())
    records = convert_logs(LanguageAdapter(german))
    assert records == [german.write(), german.standard_timings()]


def test_german_timings_filtered_below_debug2():
    logger = _logger(LogLevel.DEBUG1)
    records = convert_logs(LanguageAdapter(German(logger)))
    assert records[1] is None
    assert "Converted to German timings" not in logger.stream.getvalue()
    assert "Uses German" in logger.stream.getvalue()


def test_main_logs_adapter_message(capsys):
    assert main() == 0
    err = capsys.readouterr().err
    assert "want the english language from German" in err
    assert err.count("Converted to German timings") == 2