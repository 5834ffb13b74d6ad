"""Error taxonomy for generation and editing workflows."""


class FoodPhotographerError(Exception):
    """Base class for application errors."""


class EmptyInputError(FoodPhotographerError):
    """Raised when a menu contains no dishes."""


class EmptyPromptError(FoodPhotographerError):
    """Raised when an edit prompt is blank."""


class GenerationError(FoodPhotographerError):
    """Base class for failures reported by the image service."""


class ServiceError(GenerationError):
    """Transport or remote service failure."""


class NoImageReturnedError(GenerationError):
    """The service completed but produced no image."""


class NoEditedImageReturnedError(GenerationError):
    """The service completed but returned no image part."""


class EditFailedError(FoodPhotographerError):
    """An edit attempt failed; the image it targeted is unchanged."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class CorruptStateError(FoodPhotographerError):
    """A payload produced by this application could not be decoded."""


class MalformedPayloadError(FoodPhotographerError, ValueError):
    """A data URI is structurally invalid or not valid base64."""


class ImageNotFoundError(FoodPhotographerError, LookupError):
    """No tracked image with the requested id exists in the session."""


class EditConflictError(FoodPhotographerError):
    """The image changed while an edit was in flight."""
