"""Tests for isoterrain logging."""

import logging

import pytest

from isoterrain import Cell, Map, Tile, isoterrain_logging
from isoterrain.isoterrain_logging import (
    LOGGER_NAME,
    IsoterrainColorFormatter,
    create_module_logger,
    function_logger,
    get_module_logger,
    log_to_stderr,
    method_logger,
)


@pytest.fixture
def root_logger():
    """The isoterrain root logger, restored to its original state afterwards."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    module_levels = {
        name: module_logger.level
        for name, module_logger in isoterrain_logging._module_loggers.items()
    }
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    for name, module_level in module_levels.items():
        isoterrain_logging._module_loggers[name].setLevel(module_level)


def test_module_loggers():
    """Module loggers live below the isoterrain root logger."""
    logger = create_module_logger("some.module")
    assert logger.name == f"{LOGGER_NAME}.some.module"
    assert get_module_logger("some.module") is logger
    assert get_module_logger("other.module").name == f"{LOGGER_NAME}.other.module"


def test_module_logger_default_name():
    """Without a name, the logger is named after the calling module."""
    logger = create_module_logger()
    assert logger.name == f"{LOGGER_NAME}.{__name__}"


def test_log_to_stderr(root_logger):
    """A single colored stream handler is added, however often it is called."""
    logger = log_to_stderr(logging.INFO)
    assert logger is root_logger
    assert isoterrain_logging.get_rootlogger() is root_logger
    assert root_logger.level == logging.INFO
    assert not root_logger.propagate

    log_to_stderr()
    colored = [
        handler
        for handler in root_logger.handlers
        if isinstance(handler.formatter, IsoterrainColorFormatter)
    ]
    assert len(colored) == 1


def test_pass_root_logger_level(root_logger):
    """Module loggers can be set to the level of the root logger."""
    module_logger = get_module_logger("isoterrain.map")
    log_to_stderr(logging.WARNING, pass_root_logger_level=True)
    assert module_logger.level == logging.WARNING
    assert get_module_logger("isoterrain.cell_space.cell_state").level == logging.WARNING


def test_color_formatter():
    """Records are formatted with the color of their level."""
    record = logging.LogRecord(
        f"{LOGGER_NAME}.test", logging.WARNING, __file__, 1, "look out", None, None
    )
    text = IsoterrainColorFormatter().format(record)
    assert text.startswith(IsoterrainColorFormatter.yellow)
    assert text.endswith(IsoterrainColorFormatter.reset)
    assert "look out" in text
    assert f"[{LOGGER_NAME}.test WARNING" in text


def test_decorators(caplog):
    """Decorated methods and functions log their calls."""

    class Thing:
        @method_logger(__name__)
        def method(self, value, key=None):
            return value

    @function_logger(__name__)
    def function(value):
        return value * 2

    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        assert Thing().method(3, key="k") == 3
        assert function(4) == 8
    assert "calling Thing.method with (3,) and {'key': 'k'}" in caplog.text
    assert "calling function with (4,) and {}" in caplog.text


def test_map_logging(caplog):
    """Map operations log at debug and info level."""
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        game_map = Map(4, 4, 2)
        game_map.tile_storage.append(Tile(0, 0, 0, 0))
        game_map.command_set(1, 1, 0, Cell(0))
        game_map.command_raise_terrain(1, 1, 0)
        game_map.command_raise_terrain(1, 1, 1)
        game_map.apply_commands()

    assert "calling Map.__init__" in caplog.text
    assert "raising terrain at 1 1 0" in caplog.text
    assert "ignoring raise terrain at 1 1 1: top layer" in caplog.text
    assert all(r.name.startswith(LOGGER_NAME) for r in caplog.records)
