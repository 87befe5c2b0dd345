from __future__ import annotations

from pathlib import Path

from hiddenrules.services.telemetry import TelemetryService


def test_events_append_as_json_lines(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "telemetry.jsonl"
    telemetry = TelemetryService(path)
    telemetry.log("challenge_started", {"challenge": "c01", "seed": None})
    telemetry.log("play", {"challenge": "c01", "ok": False})

    events = telemetry.read_events()
    assert [e["type"] for e in events] == ["challenge_started", "play"]
    assert events[1]["payload"] == {"challenge": "c01", "ok": False}
    assert "ts" in events[0]
    assert len(path.read_text(encoding="utf-8").splitlines()) == 2


def test_disabled_telemetry_writes_nothing(tmp_path: Path) -> None:
    path = tmp_path / "telemetry.jsonl"
    telemetry = TelemetryService(path, enabled=False)
    telemetry.log("boot", {"ok": True})
    assert not path.exists()
    assert telemetry.read_events() == []
