import json
import logging

from Roller.config import Settings
from Roller.logging import setup_logging


def test_file_logging_writes_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "logs" / "roller.jsonl"
    settings = Settings(
        _env_file=None,
        logging_level="DEBUG",
        logging_console="NONE",
        logging_file="DEBUG",
        logging_file_path=str(path),
    )
    setup_logging(settings)

    from Roller.notation import parse

    parse("1d6+2")
    for h in logging.getLogger().handlers:
        h.flush()

    records = [json.loads(line) for line in path.read_text().splitlines()]
    events = [r["event"] for r in records]
    assert "notation.parse.result" in events
    result = next(r for r in records if r["event"] == "notation.parse.result")
    assert result["constants"] == [2]
    assert result["level"] == "debug"


def test_disabled_logging_installs_no_output_handlers(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    setup_logging(Settings(_env_file=None, logging_enabled=False, logging_file="INFO"))
    handlers = logging.getLogger().handlers
    assert all(isinstance(h, logging.NullHandler) for h in handlers)
    assert not (tmp_path / "logs").exists()


def test_defaults_log_to_console_only():
    setup_logging(None)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert handlers[0].level == logging.WARNING
