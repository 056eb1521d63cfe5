import logging
from pathlib import Path

from core import settings
from core.log import ROOT_LOGGER, ensure_logger, get_logger, read_log_tail


def test_linux_data_dir_with_xdg():
    env = {"XDG_DATA_HOME": "/tmp/xdg"}
    result = settings.get_default_data_dir(
        settings.APP_NAME,
        platform="linux",
        env=env,
        home=Path("/home/test"),
    )
    assert result == Path("/tmp/xdg") / settings.APP_NAME


def test_linux_data_dir_default_home():
    result = settings.get_default_data_dir(
        settings.APP_NAME,
        platform="linux",
        env={},
        home=Path("/home/test"),
    )
    assert result == Path("/home/test/.local/share") / settings.APP_NAME


def test_macos_data_dir():
    result = settings.get_default_data_dir(
        settings.APP_NAME,
        platform="darwin",
        env={},
        home=Path("/Users/test"),
    )
    assert result == Path("/Users/test/Library/Application Support") / settings.APP_NAME


def test_windows_data_dir_appdata():
    env = {"APPDATA": "C:/Users/test/AppData/Roaming"}
    result = settings.get_default_data_dir(
        settings.APP_NAME,
        platform="win32",
        env=env,
        home=Path("C:/Users/test"),
    )
    assert result == Path(env["APPDATA"]) / settings.APP_NAME


def test_app_name_is_sanitized():
    result = settings.get_default_data_dir("a/b", platform="linux", env={}, home=Path("/h"))
    assert result == Path("/h/.local/share/a-b")


def test_runtime_paths_inside_data_dir():
    assert settings.DB_PATH.parent == settings.DATA_DIR
    assert settings.LOG_PATH.parent == settings.LOG_DIR
    assert settings.LOG_DIR.parent == settings.DATA_DIR


def test_logger_writes_rotating_file(tmp_path):
    root = logging.getLogger(ROOT_LOGGER)
    saved = list(root.handlers)
    for handler in saved:
        root.removeHandler(handler)
    log_path = tmp_path / "logs" / "focusly.log"
    try:
        ensure_logger(log_path)
        ensure_logger(log_path)
        assert len(root.handlers) == 1
        get_logger("tasks").info("Task created: %s", "abc")
        for handler in root.handlers:
            handler.flush()
        assert "[INFO] Task created: abc" in read_log_tail(log_path)
    finally:
        for handler in list(root.handlers):
            handler.close()
            root.removeHandler(handler)
        for handler in saved:
            root.addHandler(handler)


def test_read_log_tail_missing_file(tmp_path):
    assert read_log_tail(tmp_path / "nope.log") == ""
