"""
Report generation errors.

Every failure raised by the engine derives from ReportGenerationError and
carries a human-readable message. All of them are fatal for the current call.
"""


class ReportGenerationError(Exception):
    """Base class for all report generation failures."""


class ReportInputError(ReportGenerationError, ValueError):
    """The caller supplied inputs the engine cannot work with."""


class MissingInput(ReportInputError):
    """One of image, table data or metadata was not supplied."""


class MalformedTable(ReportInputError):
    """Table data lacks a header row or any data rows."""


class MetadataError(ReportInputError):
    """Metadata could not be decoded into header fields."""


class UnreadableImage(ReportGenerationError):
    """Pixel dimensions could not be determined from the image bytes."""


class RenderingBackendFailure(ReportGenerationError):
    """The rendering backend failed to produce the document bytes."""
