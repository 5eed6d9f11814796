class TransformError(ValueError):
    """Base class for documents that cannot be transformed."""


class XmlParseError(TransformError):
    """Raised when the XML text itself is not well formed."""


class MissingRootError(TransformError):
    """Raised when a document has no content root element."""

    def __init__(self, message="No document root element found"):
        super().__init__(message)


class UnsupportedRootError(TransformError):
    """Raised when the root element is not one of the known content types."""

    def __init__(self, root):
        self.root = root
        super().__init__(f"Unsupported root: {root}")


class MalformedInputError(TransformError):
    """Raised when a field does not have the shape its root type requires."""
