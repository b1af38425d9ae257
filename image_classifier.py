# This module wraps the pre-trained image model used to recognise objects in the uploaded photo
# We use MobileNetV2 trained on ImageNet: it knows 1000 everyday objects and returns a confidence for each
# The weights and the label list are downloaded once with a timeout and cached on disk,
# then the model is kept in memory by the ImageClassifier that owns it

import json
import logging
import os
import threading
import time
from enum import Enum
from typing import Callable, Dict, List, Optional

import numpy as np
import requests
from PIL import Image

import config
from errors import ClassificationError, ModelNotReadyError, ModelUnavailableError
from waste_classifier import Prediction

logger = logging.getLogger(__name__)


class ModelState(str, Enum):
    UNLOADED = "unloaded"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


# defines a function to check if Tensorflow is available
def check_tensorflow_available() -> bool:
    """Check if TensorFlow is available"""
    try:
        import tensorflow  # noqa: F401
        return True
    except ImportError:
        return False


# downloads a file to the cache directory unless a good copy is already there
def download_file(url: str, path: str, min_size: int = 1, timeout: float = config.MODEL_DOWNLOAD_TIMEOUT) -> str:
    """Download url to path and return the path. Raises ModelUnavailableError on failure."""
    if os.path.exists(path) and os.path.getsize(path) >= min_size:
        logger.info(f"Using cached file at {path}")
        return path

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    partial_path = path + ".part"
    logger.info(f"Downloading {url}")
    # requests only bounds the connect and each read, the deadline bounds the whole transfer
    deadline = time.monotonic() + timeout
    try:
        with requests.get(url, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            total_size = int(response.headers.get("content-length", 0))
            downloaded_size = 0
            with open(partial_path, "wb") as f:
                for chunk in response.iter_content(chunk_size=8192):
                    if chunk:
                        f.write(chunk)
                        downloaded_size += len(chunk)
                    if time.monotonic() > deadline:
                        raise requests.exceptions.Timeout(f"Download exceeded {timeout}s")
            logger.info(f"Downloaded {downloaded_size} bytes (expected {total_size})")
    except requests.exceptions.Timeout as e:
        _remove_quietly(partial_path)
        raise ModelUnavailableError(
            f"Timed out after {timeout}s downloading {url}",
            user_message="Loading the AI model timed out. Please check your connection and retry.",
        ) from e
    except (requests.exceptions.RequestException, OSError) as e:
        _remove_quietly(partial_path)
        raise ModelUnavailableError(f"Failed to download {url}: {e}") from e

    if os.path.getsize(partial_path) < min_size:
        size = os.path.getsize(partial_path)
        _remove_quietly(partial_path)
        raise ModelUnavailableError(f"Download of {url} is too small: {size} bytes")

    os.replace(partial_path, path)
    return path


def _remove_quietly(path: str) -> None:
    if os.path.exists(path):
        os.remove(path)


# builds MobileNetV2 from a local weights file
def build_mobilenet(weights_path: str):
    import tensorflow as tf

    model = tf.keras.applications.MobileNetV2(weights=weights_path)
    logger.info(f"Model input shape: {model.input_shape}")
    logger.info(f"Model output shape: {model.output_shape}")
    return model


# MobileNetV2 expects pixels scaled to [-1, 1]
def preprocess_image(img: Image.Image, size=config.IMAGE_SIZE) -> np.ndarray:
    img = img.convert("RGB").resize(size)
    img_array = np.asarray(img, dtype=np.float32)
    img_array = np.expand_dims(img_array, axis=0)
    return img_array / 127.5 - 1.0


def load_class_names(path: str) -> List[str]:
    """Read the ImageNet class index and return readable labels ordered by class id."""
    with open(path, "r", encoding="utf-8") as f:
        index: Dict[str, List[str]] = json.load(f)
    return [index[str(i)][1].replace("_", " ") for i in range(len(index))]


class ImageClassifier:
    """
    Owns the image model and its loading state.

    The model and the label list are produced by injectable callables so tests can run without
    TensorFlow or network access. load() is idempotent, classify() requires a ready model.
    """

    def __init__(
        self,
        model_factory: Optional[Callable[[], object]] = None,
        labels_factory: Optional[Callable[[], List[str]]] = None,
        cache_dir: str = config.MODEL_CACHE_DIR,
    ):
        self.cache_dir = cache_dir
        self._model_factory = model_factory or self._default_model
        self._labels_factory = labels_factory or self._default_labels
        self._model = None
        self._class_names: List[str] = []
        self._state = ModelState.UNLOADED
        self._error: Optional[ModelUnavailableError] = None
        self._lock = threading.Lock()

    @property
    def state(self) -> ModelState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is ModelState.READY

    @property
    def error(self) -> Optional[ModelUnavailableError]:
        return self._error

    def _default_model(self):
        if not check_tensorflow_available():
            raise ModelUnavailableError("TensorFlow is not installed")
        weights_path = download_file(
            config.MODEL_WEIGHTS_URL,
            os.path.join(self.cache_dir, config.MODEL_WEIGHTS_FILE),
            min_size=config.MIN_WEIGHTS_SIZE,
        )
        return build_mobilenet(weights_path)

    def _default_labels(self) -> List[str]:
        index_path = download_file(
            config.CLASS_INDEX_URL,
            os.path.join(self.cache_dir, config.CLASS_INDEX_FILE),
        )
        return load_class_names(index_path)

    def load(self) -> "ImageClassifier":
        """Load the model once. A failed load is re-raised until reset() is called."""
        with self._lock:
            if self._state is ModelState.READY:
                return self
            if self._state is ModelState.FAILED:
                raise self._error

            self._state = ModelState.LOADING
            logger.info("Loading image classification model")
            try:
                class_names = self._labels_factory()
                model = self._model_factory()
            except ModelUnavailableError as e:
                self._fail(e)
                raise
            except Exception as e:
                error = ModelUnavailableError(f"Error loading model: {e}")
                self._fail(error)
                raise error from e

            self._model = model
            self._class_names = list(class_names)
            self._state = ModelState.READY
            logger.info(f"Model loaded successfully with {len(self._class_names)} classes")
            return self

    def _fail(self, error: ModelUnavailableError) -> None:
        logger.error(f"Model loading failed: {error}")
        self._model = None
        self._error = error
        self._state = ModelState.FAILED

    def reset(self) -> None:
        """Forget a failed load so the next load() tries again."""
        with self._lock:
            if self._state is not ModelState.READY:
                self._state = ModelState.UNLOADED
                self._error = None

    def classify(self, img: Image.Image, top_k: int = config.TOP_K_PREDICTIONS) -> List[Prediction]:
        """Return the top_k labels for the image, most confident first."""
        if not self.is_ready:
            raise ModelNotReadyError(f"classify() called while model is {self._state.value}")

        try:
            batch = preprocess_image(img)
            scores = np.asarray(self._model.predict(batch, verbose=0))[0]
        except Exception as e:
            logger.error(f"Error in image prediction: {e}")
            raise ClassificationError(str(e)) from e

        if len(scores) != len(self._class_names):
            raise ClassificationError(
                f"Model returned {len(scores)} scores for {len(self._class_names)} classes"
            )

        top_indices = np.argsort(scores)[::-1][:top_k]
        predictions = [
            Prediction(label=self._class_names[i], confidence=float(scores[i])) for i in top_indices
        ]
        if predictions:
            logger.info(f"Top prediction: {predictions[0].label} ({predictions[0].confidence:.2%})")
        return predictions
