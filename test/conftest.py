import io

import pytest
from PIL import Image


class FakeUploadedFile:
    """Stands in for the object returned by st.file_uploader."""

    def __init__(self, name, mime_type, data):
        self.name = name
        self.type = mime_type
        self.size = len(data)
        self._data = data

    def getvalue(self):
        return self._data


def png_bytes(size=(32, 24), color=(30, 160, 90)):
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_upload():
    return FakeUploadedFile("bottle.png", "image/png", png_bytes())
