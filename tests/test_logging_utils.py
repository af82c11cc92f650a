import logging

from safety_client import logging_utils


def test_configure_logging_installs_one_handler(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(logging_utils, "_configured", False)
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "level", root.level)
    before = len(root.handlers)

    logging_utils.configure_logging("DEBUG")
    logging_utils.configure_logging("WARNING")

    assert len(root.handlers) == before + 1
    assert root.level == logging.WARNING


def test_level_read_from_environment(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(logging_utils, "_configured", True)
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setenv("SAFETY_LOG_LEVEL", "error")

    logging_utils.configure_logging()

    assert root.level == logging.ERROR
