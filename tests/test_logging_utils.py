import json

from cavegen.logging_utils import _format, get_logger


def test_key_value_format():
    line = _format("info", event="cave_generation_complete", seed="my seed", rooms=4, skipped=None)
    assert line.startswith("level=info ts=")
    assert "event=cave_generation_complete" in line
    assert "seed=my_seed" in line
    assert "rooms=4" in line
    assert "skipped" not in line


def test_json_format(monkeypatch):
    monkeypatch.setenv("CAVEGEN_LOG_JSON", "1")
    rec = json.loads(_format("warn", event="x", size=50, skipped=None))
    assert rec["level"] == "warn"
    assert rec["event"] == "x"
    assert rec["size"] == 50
    assert "skipped" not in rec
    assert isinstance(rec["ts"], int)


def test_level_threshold(monkeypatch, capsys):
    log = get_logger("tests.threshold")
    monkeypatch.setenv("CAVEGEN_LOG_LEVEL", "warn")
    log.info(event="hidden")
    log.warn(event="shown")
    log.error(event="failed")
    out, err = capsys.readouterr()
    assert "hidden" not in out
    assert "event=shown" in out
    assert "logger=tests.threshold" in out
    assert "event=failed" in err

    monkeypatch.setenv("CAVEGEN_LOG_LEVEL", "debug")
    log.debug(event="now_visible")
    assert "event=now_visible" in capsys.readouterr().out


def test_logger_cached():
    assert get_logger("cave.same") is get_logger("cave.same")
    assert get_logger("cave.same") is not get_logger("cave.other")
