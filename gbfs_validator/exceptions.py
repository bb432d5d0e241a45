"""gbfs-validator exception hierarchy.

Fatal errors of a validation call, with correlation ID support.
Schema conformance violations are not exceptions: they are reported in
FileValidationResult.errors.

Usage:
    from gbfs_validator.exceptions import DocumentDecodeError, UnsupportedVersionError

    try:
        result = validate_file("2.3", payload, file_name="station_status")
    except UnsupportedVersionError as e:
        logger.error("Unknown GBFS version %s (correlation_id=%s)", e.version, e.correlation_id)
"""

import uuid


class GbfsValidatorError(Exception):
    """Base exception for all gbfs-validator errors.

    Carries a correlation_id for tracing errors across layers.
    """

    def __init__(self, message: str, *, correlation_id: str | None = None):
        self.correlation_id = correlation_id or str(uuid.uuid4())
        super().__init__(message)


class UnsupportedVersionError(GbfsValidatorError):
    """No schema is registered for the requested version."""

    def __init__(self, message: str, *, version: str | None = None, **kwargs):
        self.version = version
        super().__init__(message, **kwargs)


class UnsupportedFileError(UnsupportedVersionError):
    """The version is known but has no schema for the requested feed file."""

    def __init__(self, message: str, *, file_name: str | None = None, **kwargs):
        self.file_name = file_name
        super().__init__(message, **kwargs)


class SchemaLoadError(GbfsValidatorError):
    """A schema document could not be read, parsed or checked."""

    def __init__(self, message: str, *, path: str | None = None, **kwargs):
        self.path = path
        super().__init__(message, **kwargs)


class DocumentDecodeError(GbfsValidatorError):
    """The input document could not be decoded into JSON data."""

    pass
