"""Error taxonomy shared by the API, the crawler tasks and the store."""

from __future__ import annotations


class FeedError(Exception):
    """Base class for all homework feed failures."""

    code = "feed_error"


class ConfigurationError(FeedError):
    """A required setting (e.g. the portal cookie) is missing."""

    code = "configuration_error"

    def __init__(self, setting: str, hint: str = "") -> None:
        self.setting = setting
        message = f"{setting} is not set."
        if hint:
            message = f"{message} {hint}"
        super().__init__(message)


class UpstreamError(FeedError):
    """The homework portal could not be reached or answered with an error."""

    code = "upstream_error"

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class StoreError(FeedError):
    """A key-value store write failed."""

    code = "store_error"

    def __init__(self, message: str, *, failed_keys: tuple[str, ...] = ()) -> None:
        self.failed_keys = failed_keys
        super().__init__(message)


class CorruptMetadataError(FeedError):
    """Stored cache metadata could not be decoded."""

    code = "corrupt_metadata"
