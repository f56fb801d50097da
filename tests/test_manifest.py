"""Tests for manifest loading."""

import pytest

from duopin.errors import MalformedManifestError, MissingManifestError
from duopin.manifest import load_manifest, parse_manifest


class TestLoadManifest:
    def test_load(self, write_manifest, sample_manifest):
        path = write_manifest(sample_manifest)
        assert load_manifest(path) == sample_manifest

    def test_key_order_preserved(self, write_manifest):
        path = write_manifest({"components/z-z@1": {}, "components/a-a@1": {}})
        assert list(load_manifest(path)) == ["components/z-z@1", "components/a-a@1"]

    def test_missing_manifest(self, project_dir):
        with pytest.raises(MissingManifestError) as exc_info:
            load_manifest(project_dir / "components" / "duo.json", "components/duo.json")
        message = str(exc_info.value)
        assert "unable to locate components/duo.json" in message
        assert "you must run `duo` before running `duo pin`" in message
        assert exc_info.value.code == "MISSING_MANIFEST"

    def test_invalid_utf8(self, project_dir):
        """Undecodable bytes are reported as a malformed manifest."""
        path = project_dir / "components" / "duo.json"
        path.write_bytes(b'{"components/a-b@1.0.0": "\xff"}')
        with pytest.raises(MalformedManifestError) as exc_info:
            load_manifest(path, "components/duo.json")
        assert exc_info.value.code == "MALFORMED_MANIFEST"


class TestParseManifest:
    def test_invalid_json(self):
        with pytest.raises(MalformedManifestError):
            parse_manifest("{oops")

    def test_non_object(self):
        with pytest.raises(MalformedManifestError) as exc_info:
            parse_manifest('["components/a-b@1.0.0"]')
        assert "list" in str(exc_info.value)
