class ConversionError(Exception):
    """Base class for failures of a single conversion request."""

    message = "Conversion failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidImage(ConversionError):
    message = "Could not load valid image data."


class RenderFailure(ConversionError):
    message = "Failed to render ASCII art to image."
