"""Error taxonomy shared by all upstream engines."""

from __future__ import annotations


class EngineError(Exception):
    """Base class for failures raised while fetching from an upstream engine."""

    default_message = "an engine error occurred"

    def __init__(self, engine: str = "", message: str | None = None):
        self.engine = engine
        self.message = message or self.default_message
        super().__init__(f"{engine}: {self.message}" if engine else self.message)


class ConfigurationError(EngineError):
    """Raised when an engine cannot be built, e.g. an invalid selector."""

    default_message = "engine configuration is invalid"


class NoSuchEngineFound(ConfigurationError):
    """Raised when an engine name does not match any known engine."""

    def __init__(self, engine: str):
        super().__init__(engine, f"no such engine with the name '{engine}' found")


class RequestError(EngineError):
    """Raised when the upstream request fails at the transport level."""

    default_message = "error occurred while requesting data from upstream search engine"


class EmptyResultSet(EngineError):
    """Raised when the upstream page reports that nothing matched the query."""

    default_message = "the upstream search engine returned an empty result set"


class UnexpectedError(EngineError):
    """Raised for conditions that are not otherwise classified."""

    default_message = "an unexpected error occurred while processing the data"
