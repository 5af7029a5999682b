"""Tests for the calendar API call log."""

import json

from reminders.audit import log_api_call


class TestApiCallLog:
    def test_log_creates_file_and_writes_ndjson(self, tmp_path, monkeypatch) -> None:
        # Redirect log dir to tmp
        monkeypatch.setattr("reminders.audit.LOG_DIR", tmp_path)

        body = {"summary": "Poubelles", "timeZone": "Europe/Paris"}
        log_api_call("calendar", body, response={"id": "cal-123", "summary": "Poubelles"})

        log_files = list(tmp_path.glob("*.log"))
        assert len(log_files) == 1

        lines = log_files[0].read_text().strip().split("\n")
        assert len(lines) == 1

        entry = json.loads(lines[0])
        assert entry["kind"] == "calendar"
        assert entry["status"] == "ok"
        assert entry["request"] == body
        assert entry["response_id"] == "cal-123"
        assert entry["error"] is None
        assert entry["logged_at"].endswith("Z")

    def test_multiple_logs_append(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr("reminders.audit.LOG_DIR", tmp_path)

        for i in range(3):
            log_api_call("event", {"summary": f"event-{i}"}, response={"id": f"evt-{i}"})

        log_files = list(tmp_path.glob("*.log"))
        lines = log_files[0].read_text().strip().split("\n")
        assert len(lines) == 3

    def test_failure_is_recorded(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr("reminders.audit.LOG_DIR", tmp_path)

        log_api_call("event", {"summary": "Bins"}, error="<HttpError 403>")

        entry = json.loads(next(tmp_path.glob("*.log")).read_text().strip())
        assert entry["status"] == "failed"
        assert entry["response_id"] is None
        assert entry["error"] == "<HttpError 403>"

    def test_unwritable_dir_is_not_fatal(self, tmp_path, monkeypatch, caplog) -> None:
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        monkeypatch.setattr("reminders.audit.LOG_DIR", blocker / "logs")

        log_api_call("event", {"summary": "Bins"}, response={"id": "evt"})
        assert "Failed to write API call log" in caplog.text
