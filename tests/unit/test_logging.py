from __future__ import annotations

from gradforms import logger as package_logger
from gradforms.logging import configure_logging, get_logger
from gradforms.settings import Settings


def test_stdlib_logger_is_configured(capsys) -> None:
    configure_logging(settings=Settings(LOG_JSON=False, LOG_LEVEL="INFO"), force=True)
    logger = get_logger("tests")
    logger.info("hello")

    captured = capsys.readouterr()
    assert "hello" in captured.err.lower()


def test_log_file_receives_records(tmp_path) -> None:
    log_file = tmp_path / "gradforms.log"
    configure_logging(settings=Settings(LOG_JSON=True, LOG_LEVEL="INFO", LOG_FILE=str(log_file)), force=True)

    get_logger("tests.file").info("written to file")

    assert "written to file" in log_file.read_text(encoding="utf-8")


def test_package_logger_created_on_import() -> None:
    assert callable(getattr(package_logger, "info", None))
