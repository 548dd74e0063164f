"""
Tests for the mailcraft-preview command.
"""

import argparse
import json
import sys

import pytest
from loguru import logger

from mailcraft.cli import preview


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestPreviewMain:
    """Test the CLI entry point."""

    def test_prints_built_email(self, capsys):
        code = preview.main([
            "--from", "a@x.com",
            "--to", "b@x.com",
            "--to", "c@x.com",
            "--reply-to", "r@x.com",
            "--subject", "Hi",
            "--body", "<p>Hello</p>",
            "--html",
            "--header", "X-Tag=a",
            "--header", "X-Tag = b",
        ])

        assert code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["from"] == ["a@x.com"]
        assert output["to"] == ["b@x.com", "c@x.com"]
        assert output["reply_to"] == ["r@x.com"]
        assert output["subject"] == "Hi"
        assert output["body"]["content_type"] == "text/html"
        assert output["headers"] == {"X-Tag": ["a", "b"]}

    def test_default_subject(self, capsys):
        code = preview.main(["--from", "a@x.com", "--to", "b@x.com", "--body", "hi"])

        assert code == 0
        assert json.loads(capsys.readouterr().out)["subject"] == "no subject"

    def test_missing_body_exits_with_error(self, capsys):
        code = preview.main(["--from", "a@x.com", "--to", "b@x.com"])

        assert code == 1
        assert capsys.readouterr().out == ""

    def test_bad_header_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            preview.main(["--from", "a@x.com", "--to", "b@x.com", "--body", "hi", "--header", "nope"])

        assert exc_info.value.code == 2

    def test_attachment(self, tmp_path, capsys):
        path = tmp_path / "report.pdf"
        path.write_bytes(b"%PDF-1.4")

        code = preview.main(["--from", "a@x.com", "--to", "b@x.com", "--body", "hi", "--attach", str(path)])

        assert code == 0
        attachments = json.loads(capsys.readouterr().out)["attachments"]
        assert attachments == [{"id": "report.pdf", "content_type": "application/pdf", "size": 8}]

    def test_attachment_over_limit(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("MAILCRAFT_MAX_ATTACHMENT_MB", "0.000001")
        path = tmp_path / "big.bin"
        path.write_bytes(b"x" * 100)

        code = preview.main(["--from", "a@x.com", "--to", "b@x.com", "--body", "hi", "--attach", str(path)])

        assert code == 1
        assert capsys.readouterr().out == ""


    def test_missing_attachment_exits_with_error(self, tmp_path, capsys):
        code = preview.main([
            "--from", "a@x.com", "--to", "b@x.com", "--body", "hi",
            "--attach", str(tmp_path / "nope.pdf"),
        ])

        assert code == 1
        assert capsys.readouterr().out == ""

    def test_unreadable_attachment_is_mailcraft_error(self, tmp_path):
        with pytest.raises(preview.AttachmentUnreadableError) as exc_info:
            preview.load_attachment(tmp_path, preview.get_settings())

        assert isinstance(exc_info.value.__cause__, OSError)

    def test_invalid_log_level_exits_with_error(self, monkeypatch, capsys):
        monkeypatch.setenv("MAILCRAFT_LOG_LEVEL", "verbose")

        code = preview.main(["--from", "a@x.com", "--to", "b@x.com", "--body", "hi"])

        assert code == 1
        assert capsys.readouterr().out == ""


class TestParseHeader:
    """Test KEY=VALUE parsing."""

    def test_splits_on_first_equals(self):
        assert preview.parse_header("X-Query=a=b") == ("X-Query", "a=b")

    @pytest.mark.parametrize("raw", ["novalue", "=value"])
    def test_rejects_malformed(self, raw):
        with pytest.raises(argparse.ArgumentTypeError):
            preview.parse_header(raw)
