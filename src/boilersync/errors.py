"""Errors raised by boilersync, one class per failing stage of a sync run."""


class BoilerSyncError(Exception):
    """Base class for every failure boilersync reports to the user"""


class ConfigError(BoilerSyncError):
    """Raise when the boilersync configuration file is malformed"""


class SourceUnavailableError(BoilerSyncError):
    """Raise when the remote manifest or boilerplate list cannot be obtained"""


class LocalScanError(BoilerSyncError):
    """Raise when a local file cannot be read for a reason other than absence"""

    def __init__(self, relative_path: str, reason: str) -> None:
        super().__init__(f"Cannot read {relative_path}: {reason}")
        self.relative_path = relative_path
        self.reason = reason


class WriteError(BoilerSyncError):
    """Raise when a single file of the write set cannot be materialized"""

    def __init__(self, relative_path: str, reason: str) -> None:
        super().__init__(f"Cannot write {relative_path}: {reason}")
        self.relative_path = relative_path
        self.reason = reason


class OperatorCancelled(BoilerSyncError):
    """Raise when the operator aborts the changed-file selection step"""

    def __init__(self, message: str = "Cancelled.") -> None:
        super().__init__(message)
