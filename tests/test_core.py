"""
Tests for config, errors, logging and reporters.
"""

import logging

import pytest
from pydantic import ValidationError
from rich.console import Console

from duopin.cli.utils import console, handle_error
from duopin.config import PinConfig
from duopin.errors import DuoPinError, MalformedIdentifierError, MissingManifestError
from duopin.logger import get_logger
from duopin.reporter import (
    ConsoleReporter,
    NullReporter,
    RecordingReporter,
    make_reporter,
)


class TestPinConfig:
    def test_defaults(self, tmp_path):
        config = PinConfig(root=tmp_path)
        assert config.manifest_path == tmp_path / "components" / "duo.json"
        assert config.lockfile_path == tmp_path / "component.json"
        assert config.remote_prefix == "components"
        assert config.indent == 2
        assert not config.quiet

    def test_negative_indent_rejected(self):
        with pytest.raises(ValidationError):
            PinConfig(indent=-1)

    def test_blank_prefix_rejected(self):
        with pytest.raises(ValidationError):
            PinConfig(remote_prefix="  ")

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            PinConfig(colour=True)


class TestErrors:
    def test_to_dict(self):
        error = MissingManifestError("no manifest", path="components/duo.json")
        assert error.to_dict() == {
            "error": "MissingManifestError",
            "code": "MISSING_MANIFEST",
            "message": "no manifest",
            "path": "components/duo.json",
        }

    def test_identifier_error_carries_key(self):
        error = MalformedIdentifierError("bad key", key="components/x")
        assert isinstance(error, DuoPinError)
        assert error.to_dict()["key"] == "components/x"


class TestLogger:
    def test_context_rendered(self, caplog):
        logger = get_logger("tests.logger")
        with caplog.at_level(logging.DEBUG, logger="duopin"):
            logger.debug("Skipping local component", component="local/thing")
        assert "Skipping local component component=local/thing" in caplog.text

    def test_names_nested_under_package(self):
        assert get_logger("other").name == "duopin.other"
        assert get_logger("duopin.reducer").name == "duopin.reducer"


class TestReporters:
    def test_make_reporter(self):
        assert isinstance(make_reporter(quiet=True), NullReporter)
        assert isinstance(make_reporter(quiet=False), ConsoleReporter)

    def test_console_reporter_format(self):
        console = Console(record=True, width=80, color_system=None)
        ConsoleReporter(console).pin("foo/bar@1.2.3")
        assert console.export_text() == "       pin : foo/bar@1.2.3\n"

    def test_console_reporter_does_not_interpret_markup(self):
        console = Console(record=True, width=80, color_system=None)
        ConsoleReporter(console).dupe("[bold]a/b@1.0.0")
        assert "[bold]a/b@1.0.0" in console.export_text()

    def test_recording_reporter(self):
        reporter = RecordingReporter()
        reporter.reading("components/duo.json")
        reporter.writing("1 dependencies to component.json")
        assert reporter.events == [
            ("reading", "components/duo.json"),
            ("writing", "1 dependencies to component.json"),
        ]


class TestHandleError:
    def test_unexpected_error_text_is_not_markup(self):
        with console.capture() as capture:
            handle_error(RuntimeError("bad tag [/closing] in message"))
        output = capture.get()
        assert "Unexpected error: bad tag [/closing] in message" in output
