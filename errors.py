# Exceptions raised by the analysis and report modules
# The pages catch these at each call site and turn them into messages for the user


class EcoConvertError(Exception):
    """Base class for all errors raised by EcoConvert."""

    # message shown to the user when the error reaches a page
    user_message = "Something went wrong. Please try again."

    def __init__(self, message: str = "", user_message: str = None):
        super().__init__(message or self.user_message)
        if user_message:
            self.user_message = user_message


class ModelUnavailableError(EcoConvertError):
    """The image model could not be downloaded or built."""

    user_message = "Failed to load AI model. Please try again later."


class ModelNotReadyError(EcoConvertError):
    """classify() was called before the model finished loading."""

    user_message = "The AI model is not ready yet."


class ClassificationError(EcoConvertError):
    """Inference failed on a loaded model."""

    user_message = "Failed to analyze image. Please try again."


class ReportGenerationError(EcoConvertError):
    """The PDF report could not be built or serialized."""

    user_message = "Failed to generate the report. Please try again."


class InvalidImageError(EcoConvertError):
    """The uploaded file is not an image we can decode."""

    user_message = "Please upload an image file (JPG, PNG, WEBP, BMP or GIF)."
