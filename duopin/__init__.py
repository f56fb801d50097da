"""
duo-pin

Pins the components installed by `duo` into component.json so that builds
are reproducible and lockfile diffs stay clean.

Usage:
    from duopin import PinConfig, run_pin, RecordingReporter

    reporter = RecordingReporter()
    summary = run_pin(PinConfig(root=project_dir), reporter)
    summary.document["dependencies"]  # {"owner/name": "version", ...}
"""

from .config import PinConfig
from .constants import DUOPIN_VERSION
from .errors import (
    DuoPinError,
    MalformedIdentifierError,
    MalformedLockfileError,
    MalformedManifestError,
    MissingManifestError,
    WriteFailureError,
)
from .identifier import DependencyIdentifier, parse_identifier
from .lockfile import merge_documents, merge_lockfile, read_lockfile, serialize_lockfile, write_lockfile
from .logger import configure_logging, get_logger
from .manifest import load_manifest, parse_manifest
from .pipeline import PinPipeline, PinStage, PinSummary, run_pin
from .reducer import DuplicateRecord, PinResult, is_remote, reduce_pins
from .reporter import ConsoleReporter, NullReporter, RecordingReporter, Reporter, make_reporter
from .sorter import canonical_dependencies, sort_pins

__version__ = DUOPIN_VERSION

__all__ = [
    # Config
    "PinConfig",
    # Errors
    "DuoPinError",
    "MissingManifestError",
    "MalformedManifestError",
    "MalformedIdentifierError",
    "MalformedLockfileError",
    "WriteFailureError",
    # Parsing
    "DependencyIdentifier",
    "parse_identifier",
    # Reduction
    "DuplicateRecord",
    "PinResult",
    "is_remote",
    "reduce_pins",
    # Sorting
    "sort_pins",
    "canonical_dependencies",
    # Manifest / lockfile
    "load_manifest",
    "parse_manifest",
    "read_lockfile",
    "merge_documents",
    "merge_lockfile",
    "serialize_lockfile",
    "write_lockfile",
    # Pipeline
    "PinPipeline",
    "PinStage",
    "PinSummary",
    "run_pin",
    # Reporting / logging
    "Reporter",
    "ConsoleReporter",
    "NullReporter",
    "RecordingReporter",
    "make_reporter",
    "get_logger",
    "configure_logging",
]
