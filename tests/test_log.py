import logging

from trek.core.log import DEFAULT_LOGGER_NAME, configure_logging, parse_level


def test_parse_level_accepts_names_case_insensitively() -> None:
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" Info ") == logging.INFO


def test_parse_level_rejects_unknown_or_empty() -> None:
    assert parse_level(None) is None
    assert parse_level("") is None
    assert parse_level("verbose") is None
    assert parse_level("getLogger") is None


def test_configure_logging_sets_level_and_single_handler() -> None:
    logger = configure_logging("INFO", force=True)
    assert logger.name == DEFAULT_LOGGER_NAME
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1

    configure_logging("DEBUG", force=True)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    configure_logging("WARNING", force=True)


def test_configure_logging_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("TREK_LOG_LEVEL", "error")
    logger = configure_logging(force=True)
    assert logger.level == logging.ERROR
    configure_logging("WARNING", force=True)


def test_configure_logging_is_idempotent_without_force() -> None:
    logger = configure_logging("WARNING", force=True)
    configure_logging("DEBUG")
    assert logger.level == logging.WARNING
