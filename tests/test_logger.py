import logging

from file_extractor.logger import Timer, get_logger, setup_logging


def test_extra_data_is_rendered(caplog):
    logger = get_logger("file_extractor.test")

    with caplog.at_level(logging.DEBUG, logger="file_extractor.test"):
        logger.info("Extracted", extra_data={"file_path": "a.txt", "character_count": 3})

    assert caplog.messages == ["Extracted [file_path=a.txt, character_count=3]"]


def test_setup_logging_sets_level():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level

    setup_logging("warning")
    try:
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


def test_timer_measures_elapsed():
    with Timer("noop") as timer:
        pass

    assert timer.get_elapsed_ms() >= 0
    assert timer.elapsed_ms is not None
