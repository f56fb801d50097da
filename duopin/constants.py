"""
duo-pin Shared Constants

Single source of truth for file locations, the remote dependency prefix,
reporter event styling and process exit codes.

Usage:
    from duopin.constants import MANIFEST_NAME, LOCKFILE_NAME

    manifest_path = root / MANIFEST_NAME
"""

# =============================================================================
# VERSION INFORMATION
# =============================================================================

DUOPIN_VERSION = "0.1.0"
"""Current duo-pin release"""


# =============================================================================
# FILE LOCATIONS (relative to the invocation directory)
# =============================================================================

MANIFEST_NAME = "components/duo.json"
"""Resolved manifest written by `duo` during installation"""

LOCKFILE_NAME = "component.json"
"""Lockfile that receives the pinned `dependencies` section"""

LOCKFILE_TMP_SUFFIX = ".tmp"
"""Suffix of the staging file used for atomic lockfile writes"""


# =============================================================================
# PINNING
# =============================================================================

REMOTE_PREFIX = "components"
"""Manifest keys starting with this prefix are remote dependencies"""

DEPENDENCIES_FIELD = "dependencies"
"""Reserved lockfile field replaced on every run"""

DEFAULT_INDENT = 2
"""Default JSON indentation for the lockfile"""


# =============================================================================
# REPORTER EVENTS
# =============================================================================

EVENT_READING = "reading"
EVENT_PIN = "pin"
EVENT_DUPE = "dupe"
EVENT_WRITING = "writing"
EVENT_ERROR = "error"

EVENT_STYLES = {
    EVENT_READING: "cyan",
    EVENT_PIN: "cyan",
    EVENT_WRITING: "cyan",
    EVENT_DUPE: "yellow",
    EVENT_ERROR: "red",
}
"""Rich style used for each reporter event label"""


# =============================================================================
# EXIT CODES
# =============================================================================

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130
