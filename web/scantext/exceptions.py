"""Exceptions raised by the scan text pipeline."""


class ScanTextError(Exception):
    """Base class for scantext errors."""


class LinkBuildError(ScanTextError):
    """No canonical URL could be built for an entity identifier."""

    def __init__(self, entity_type_id, identifier, reason=None):
        self.entity_type_id = entity_type_id
        self.identifier = identifier
        message = f"Cannot build canonical URL for {entity_type_id} {identifier}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownEntityTypeError(ScanTextError):
    """The entity type id has no registered configuration."""


class UnknownTextFormatError(ScanTextError):
    """The text format id is not registered."""
