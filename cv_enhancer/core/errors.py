"""Exceptions raised at the collaborator boundaries (upload store, text extraction).

The parser itself never raises on text content; see resume_parser.
"""


class CVEnhancerError(Exception):
    """Base class for all service errors."""


class TextExtractionError(CVEnhancerError):
    """The document could not be read, or it contains no extractable text."""


class UnsupportedFileTypeError(CVEnhancerError):
    pass


class UploadNotFoundError(CVEnhancerError):
    pass


class UploadTooLargeError(CVEnhancerError):
    pass
