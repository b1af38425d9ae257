# This module handles the photo the user selects or drops on the analysis page
# It checks that the file really is an image, decodes it with PIL for the model and the preview,
# and keeps the upload, the analysis result and the busy flags together in the session state

import io
import logging
from dataclasses import dataclass
from typing import Any, MutableMapping, Optional, Tuple

from PIL import Image, UnidentifiedImageError

from errors import InvalidImageError
from waste_classifier import AnalysisResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedImage:
    file_name: str
    mime_type: str
    data: bytes
    image: Image.Image

    @property
    def preview(self) -> Image.Image:
        return self.image


def accept_upload(uploaded_file: Any) -> UploadedImage:
    """
    Validate and decode a file coming from st.file_uploader (or anything with name, type and getvalue()).
    Raises InvalidImageError for non-image files and images PIL cannot read.
    """
    file_name = getattr(uploaded_file, "name", "upload")
    mime_type = getattr(uploaded_file, "type", "") or ""

    if not mime_type.startswith("image/"):
        logger.warning(f"Rejected upload {file_name} with type '{mime_type}'")
        raise InvalidImageError(f"{file_name} is not an image ({mime_type or 'unknown type'})")

    data = uploaded_file.getvalue()
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        logger.warning(f"Could not decode {file_name}: {e}")
        raise InvalidImageError(f"Could not decode {file_name}") from e

    logger.info(f"Accepted upload {file_name} ({mime_type}, {image.size[0]}x{image.size[1]})")
    return UploadedImage(file_name=file_name, mime_type=mime_type, data=data, image=image.convert("RGB"))


class UploadState:
    """
    View over the session state keys used by the analysis page.

    Works with st.session_state or a plain dict, so it can be tested without Streamlit.
    """

    KEYS = {
        "uploaded_image": None,
        "upload_key": None,
        "analysis_result": None,
        "is_loading": False,
        "report_generating": False,
        "report": None,
        "analysis_error": None,
    }

    def __init__(self, session: MutableMapping):
        self.session = session
        for key, default in self.KEYS.items():
            if key not in self.session:
                self.session[key] = default

    @property
    def image(self) -> Optional[UploadedImage]:
        return self.session["uploaded_image"]

    @property
    def result(self) -> Optional[AnalysisResult]:
        return self.session["analysis_result"]

    @property
    def error(self) -> Optional[str]:
        return self.session["analysis_error"]

    @property
    def is_loading(self) -> bool:
        return self.session["is_loading"]

    @property
    def report_generating(self) -> bool:
        return self.session["report_generating"]

    def is_new_upload(self, upload_key: str) -> bool:
        return self.session["upload_key"] != upload_key

    # a new picture replaces the old one and clears anything computed from it
    def select(self, image: UploadedImage, upload_key: Optional[str] = None) -> None:
        self.session["uploaded_image"] = image
        self.session["upload_key"] = upload_key
        self.session["analysis_result"] = None
        self.session["analysis_error"] = None
        self.session["report"] = None

    def remove(self) -> None:
        for key, default in self.KEYS.items():
            self.session[key] = default

    def set_loading(self, value: bool) -> None:
        self.session["is_loading"] = value

    def set_report_generating(self, value: bool) -> None:
        self.session["report_generating"] = value

    def set_result(self, result: AnalysisResult) -> None:
        self.session["analysis_result"] = result
        self.session["analysis_error"] = None
        self.session["report"] = None

    @property
    def report(self) -> Optional[Tuple[str, bytes]]:
        """(file name, PDF bytes) of the last generated report, if any."""
        return self.session["report"]

    def set_report(self, file_name: str, data: bytes) -> None:
        self.session["report"] = (file_name, data)

    def set_error(self, message: Optional[str]) -> None:
        self.session["analysis_error"] = message

    @property
    def can_analyze(self) -> bool:
        return self.image is not None and self.result is None and not self.is_loading

    @property
    def can_download_report(self) -> bool:
        return self.result is not None and self.result.is_waste and not self.report_generating
