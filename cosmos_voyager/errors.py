"""Exception types raised by Cosmos Voyager."""


class VoyagerError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(VoyagerError):
    """The settings file could not be read or holds invalid values."""


class UnknownEntityError(VoyagerError, KeyError):
    """A galaxy, system or planet id is not present in the universe."""

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(f"unknown {kind}: {entity_id!r}")
        self.kind = kind
        self.entity_id = entity_id

    def __str__(self) -> str:
        return self.args[0]
