import logging

import pytest

from app.logging_config import LOG_FILE, setup_logging


@pytest.fixture
def restore_root_logger():
    """Detach whatever handlers a test adds to the root logger."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_setup_logging_writes_to_rotating_file(tmp_path, restore_root_logger):
    path = setup_logging(tmp_path, level="info")

    logging.getLogger("app.departments").info("Department 1 added: Engineering")

    assert path == tmp_path / LOG_FILE
    line = path.read_text(encoding="utf-8").strip().splitlines()[-1]
    assert "| INFO | app.departments | Department 1 added: Engineering" in line


def test_setup_logging_twice_adds_one_file_handler(tmp_path, restore_root_logger):
    setup_logging(tmp_path)
    setup_logging(tmp_path)

    owners = [
        h for h in logging.getLogger().handlers
        if getattr(h, "baseFilename", None) == str((tmp_path / LOG_FILE).resolve())
    ]
    assert len(owners) == 1


@pytest.mark.parametrize("sql_echo, expected", [(False, logging.WARNING), (True, logging.INFO)])
def test_sql_echo_controls_sqlalchemy_logger(tmp_path, restore_root_logger, sql_echo, expected):
    engine_logger = logging.getLogger("sqlalchemy.engine")
    previous = engine_logger.level

    setup_logging(tmp_path, sql_echo=sql_echo)

    assert engine_logger.level == expected
    engine_logger.setLevel(previous)
