"""Tests for the structlog rendering of package log records."""

import json
import logging

import pytest
import structlog

from artifact_client.core.logging import LOGGER_NAMES, configure_structlog
from artifact_client.transfer import TransferEngine


@pytest.fixture(autouse=True)
def restore_loggers():
    saved = {
        name: (list(logging.getLogger(name).handlers), logging.getLogger(name).level,
               logging.getLogger(name).propagate)
        for name in LOGGER_NAMES
    }
    yield
    for name, (handlers, level, propagate) in saved.items():
        target = logging.getLogger(name)
        target.handlers = handlers
        target.setLevel(level)
        target.propagate = propagate
    structlog.reset_defaults()


def _json_lines(out: str) -> list[dict]:
    return [json.loads(line) for line in out.splitlines() if line.strip()]


class TestConfigureStructlog:
    def test_package_records_rendered_as_json(self, capsys) -> None:
        configure_structlog(debug=False)
        logging.getLogger("artifact_client.storage.service").info("Created %s", "repo/dir/")

        [record] = _json_lines(capsys.readouterr().out)
        assert record["event"] == "Created repo/dir/"
        assert record["level"] == "info"
        assert record["logger"] == "artifact_client.storage.service"
        assert "timestamp" in record

    def test_debug_records_suppressed_in_prod_mode(self, capsys) -> None:
        configure_structlog(debug=False)
        logging.getLogger("artifact_client.transport.client").debug("GET /x")
        assert capsys.readouterr().out == ""

    def test_console_renderer_in_debug_mode(self, capsys) -> None:
        configure_structlog(debug=True)
        logging.getLogger("artifact_client.transport.client").debug("GET /x")

        out = capsys.readouterr().out
        assert "GET /x" in out
        with pytest.raises(json.JSONDecodeError):
            json.loads(out.splitlines()[0])

    def test_reconfigure_replaces_handler(self) -> None:
        configure_structlog(debug=True)
        configure_structlog(debug=False)

        for name in LOGGER_NAMES:
            assert len(logging.getLogger(name).handlers) == 1

    def test_structlog_loggers_share_the_handler(self, capsys) -> None:
        configure_structlog(debug=False)
        structlog.get_logger("artifact_client.test").info("bound event", key="value")

        [record] = _json_lines(capsys.readouterr().out)
        assert record["event"] == "bound event"
        assert record["key"] == "value"

    @pytest.mark.asyncio
    async def test_engine_log_line_is_json(self, capsys, transport, fake_repo, tmp_path) -> None:
        source = tmp_path / "app.jar"
        source.write_bytes(b"bytes")
        configure_structlog(debug=False)

        await TransferEngine(transport).upload_file("libs/app.jar", source)

        records = _json_lines(capsys.readouterr().out)
        uploaded = [r for r in records if r["logger"] == "artifact_client.transfer.engine"]
        assert uploaded[0]["event"] == f"Uploaded {source} to libs/app.jar"
        assert uploaded[0]["level"] == "info"
