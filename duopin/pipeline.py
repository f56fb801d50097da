"""
Pin Pipeline
============

Runs one pin from manifest to lockfile:

    Start -> Loaded -> Reduced -> Sorted -> Merged -> Written -> Done

Any DuoPinError moves the run to Failed and propagates to the caller.
There are no retries and no partial results; the lockfile is only touched
by the final atomic write.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import PinConfig
from .constants import DEPENDENCIES_FIELD
from .errors import DuoPinError
from .lockfile import merge_lockfile, write_lockfile
from .logger import get_logger
from .manifest import load_manifest
from .reducer import DuplicateRecord, reduce_pins
from .reporter import NullReporter, Reporter
from .sorter import canonical_dependencies

logger = get_logger(__name__)


class PinStage(str, Enum):
    """Stages of a pin run."""

    START = "start"
    LOADED = "loaded"
    REDUCED = "reduced"
    SORTED = "sorted"
    MERGED = "merged"
    WRITTEN = "written"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PinSummary:
    """Outcome of a successful pin run."""

    lockfile_path: Path
    document: Dict[str, Any]
    created: bool
    duplicates: List[DuplicateRecord] = field(default_factory=list)
    stages: List[PinStage] = field(default_factory=list)

    @property
    def pinned(self) -> int:
        return len(self.document.get(DEPENDENCIES_FIELD, {}))


class PinPipeline:
    """Drives a single pin run and tracks its stage."""

    def __init__(self, config: PinConfig, reporter: Optional[Reporter] = None):
        self.config = config
        self.reporter = reporter or NullReporter()
        self.stage = PinStage.START
        self.history: List[PinStage] = [PinStage.START]

    def _advance(self, stage: PinStage) -> None:
        logger.debug("Pipeline stage", stage=stage.value, previous=self.stage.value)
        self.stage = stage
        self.history.append(stage)

    def run(self) -> PinSummary:
        """
        Execute every stage in order.

        Raises:
            DuoPinError: On any fatal condition (stage is left at FAILED)
        """
        try:
            return self._run()
        except DuoPinError as e:
            logger.debug("Pipeline failed", stage=self.stage.value, code=e.code)
            self._advance(PinStage.FAILED)
            raise

    def _run(self) -> PinSummary:
        config = self.config

        self.reporter.reading(config.manifest_name)
        manifest = load_manifest(config.manifest_path, config.manifest_name)
        self._advance(PinStage.LOADED)

        reduced = reduce_pins(manifest, config.remote_prefix, self.reporter)
        self._advance(PinStage.REDUCED)

        dependencies = canonical_dependencies(reduced.pins)
        self._advance(PinStage.SORTED)

        lockfile_path = config.lockfile_path
        created = not lockfile_path.exists()
        document = merge_lockfile(dependencies, lockfile_path)
        self._advance(PinStage.MERGED)

        self.reporter.writing(f"{len(dependencies)} dependencies to {config.lockfile_name}")
        write_lockfile(document, lockfile_path, config.indent)
        self._advance(PinStage.WRITTEN)

        self._advance(PinStage.DONE)
        return PinSummary(
            lockfile_path=lockfile_path,
            document=document,
            created=created,
            duplicates=list(reduced.duplicates),
            stages=list(self.history),
        )


def run_pin(config: PinConfig, reporter: Optional[Reporter] = None) -> PinSummary:
    """
    Pin the manifest under ``config.root`` into its lockfile.

    Args:
        config: Run configuration
        reporter: Progress sink (defaults to a silent reporter)

    Returns:
        PinSummary describing the written lockfile

    Raises:
        MissingManifestError, MalformedManifestError, MalformedIdentifierError,
        MalformedLockfileError, WriteFailureError
    """
    return PinPipeline(config, reporter).run()


__all__ = ["PinStage", "PinSummary", "PinPipeline", "run_pin"]
