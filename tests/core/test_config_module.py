import pytest

from quadspace.config import (
    CONFIG,
    ConfigError,
    IndexConfig,
    LoggingConfig,
    ViewerConfig,
    load_config,
)


def test_config_module_loads_config():
    assert isinstance(CONFIG.index, IndexConfig)
    assert isinstance(CONFIG.viewer, ViewerConfig)
    assert isinstance(CONFIG.logging, LoggingConfig)
    assert CONFIG.index.capacity == 4
    assert CONFIG.index.search_step == 10.0


def test_missing_file_uses_defaults(tmp_path):
    cfg = load_config(tmp_path / "absent.yaml")
    assert cfg.index == IndexConfig()
    assert cfg.viewer == ViewerConfig()
    assert cfg.logging.global_level == "INFO"


def test_load_custom_values(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "index:\n"
        "  center: [5, -5]\n"
        "  width: 64\n"
        "  height: 32\n"
        "  capacity: 8\n"
        "viewer:\n"
        "  window_size: [640, 320]\n"
        "logging:\n"
        "  global_level: debug\n"
        "  module_levels:\n"
        "    quadspace.gui: WARNING\n"
    )
    cfg = load_config(path)
    assert cfg.index.center == (5.0, -5.0)
    assert (cfg.index.width, cfg.index.height, cfg.index.capacity) == (64.0, 32.0, 8)
    assert cfg.index.max_depth == 20
    assert cfg.viewer.window_size == (640, 320)
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"quadspace.gui": "WARNING"}


@pytest.mark.parametrize(
    "body",
    [
        "index:\n  capacity: 0\n",
        "index:\n  width: -10\n",
        "index:\n  search_step: 0\n",
        "index:\n  center: [1]\n",
        "index:\n  capacity: many\n",
        "viewer:\n  window_size: big\n",
    ],
)
def test_invalid_values_raise_config_error(tmp_path, body):
    path = tmp_path / "config.yaml"
    path.write_text(body)
    with pytest.raises(ConfigError):
        load_config(path)
