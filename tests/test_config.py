import importlib
import logging

from task_manager import config, logging_setup


def test_defaults(monkeypatch):
    for name in ["SERVICE_HOST", "SERVICE_PORT", "PORT", "CORS_ALLOW_ORIGINS", "TASK_API_URL",
                 "TASK_API_TIMEOUT", "LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)

    reloaded = importlib.reload(config)

    assert reloaded.SERVICE_HOST == "0.0.0.0"
    assert reloaded.SERVICE_PORT == 5000
    assert reloaded.CORS_ALLOW_ORIGINS == ["*"]
    assert reloaded.TASK_API_URL == "http://localhost:5000/api"
    assert reloaded.TASK_API_TIMEOUT == 10.0
    assert reloaded.LOG_LEVEL == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)
    monkeypatch.delenv("SERVICE_PORT", raising=False)
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.example, http://b.example")

    reloaded = importlib.reload(config)

    assert reloaded.SERVICE_PORT == 8080
    assert reloaded.CORS_ALLOW_ORIGINS == ["http://a.example", "http://b.example"]

    monkeypatch.undo()
    importlib.reload(config)


def test_setup_logging_replaces_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        logging_setup.setup_logging("debug")
        logging_setup.setup_logging("WARNING")

        ours = [h for h in root.handlers if isinstance(h, logging_setup._TaskManagerHandler)]
        assert len(ours) == 1
        assert root.level == logging.WARNING

        logging_setup.setup_logging("not-a-level")
        assert root.level == logging.INFO
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
