import json

import numpy as np
import pytest
import requests
from PIL import Image

import image_classifier
from errors import ClassificationError, ModelNotReadyError, ModelUnavailableError
from image_classifier import ImageClassifier, ModelState, download_file, load_class_names, preprocess_image

CLASS_NAMES = ["tabby cat", "water bottle", "tin can", "banana"]


class FakeModel:
    def __init__(self, scores):
        self.scores = np.asarray([scores], dtype=np.float32)
        self.batches = []

    def predict(self, batch, verbose=0):
        self.batches.append(batch)
        return self.scores


class BrokenModel:
    def predict(self, batch, verbose=0):
        raise ValueError("bad input")


class Counter:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if isinstance(self.value, Exception):
            raise self.value
        return self.value


class FakeResponse:
    def __init__(self, body):
        self.body = body
        self.headers = {"content-length": str(len(body))}

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False

    def raise_for_status(self):
        pass

    def iter_content(self, chunk_size=8192):
        for start in range(0, len(self.body), chunk_size):
            yield self.body[start:start + chunk_size]


@pytest.fixture
def image():
    return Image.new("RGB", (64, 48), (200, 200, 200))


def make_classifier(model, labels=CLASS_NAMES):
    return ImageClassifier(model_factory=lambda: model, labels_factory=lambda: labels)


def test_classify_before_load_raises(image):
    classifier = make_classifier(FakeModel([0.1, 0.2, 0.3, 0.4]))

    assert classifier.state is ModelState.UNLOADED
    with pytest.raises(ModelNotReadyError):
        classifier.classify(image)


def test_load_is_idempotent():
    model_factory = Counter(FakeModel([0.25] * 4))
    classifier = ImageClassifier(model_factory=model_factory, labels_factory=lambda: CLASS_NAMES)

    classifier.load()
    classifier.load()

    assert classifier.is_ready
    assert model_factory.calls == 1


def test_failed_load_is_remembered_until_reset():
    model_factory = Counter(ModelUnavailableError("download timed out"))
    classifier = ImageClassifier(model_factory=model_factory, labels_factory=lambda: CLASS_NAMES)

    with pytest.raises(ModelUnavailableError):
        classifier.load()
    assert classifier.state is ModelState.FAILED
    assert classifier.error is not None

    with pytest.raises(ModelUnavailableError):
        classifier.load()
    assert model_factory.calls == 1

    model_factory.value = FakeModel([0.25] * 4)
    classifier.reset()
    classifier.load()
    assert classifier.is_ready
    assert model_factory.calls == 2


def test_unexpected_load_error_is_wrapped():
    classifier = ImageClassifier(model_factory=Counter(RuntimeError("boom")), labels_factory=lambda: CLASS_NAMES)

    with pytest.raises(ModelUnavailableError) as excinfo:
        classifier.load()

    assert excinfo.value.user_message == "Failed to load AI model. Please try again later."
    assert classifier.state is ModelState.FAILED


def test_classify_returns_top_k_most_confident_first(image):
    model = FakeModel([0.05, 0.6, 0.3, 0.05])
    classifier = make_classifier(model).load()

    predictions = classifier.classify(image, top_k=2)

    assert [p.label for p in predictions] == ["water bottle", "tin can"]
    assert predictions[0].confidence == pytest.approx(0.6)
    assert model.batches[0].shape == (1, 224, 224, 3)


def test_prediction_failure_raises_classification_error(image):
    classifier = make_classifier(BrokenModel()).load()

    with pytest.raises(ClassificationError):
        classifier.classify(image)
    assert classifier.is_ready


def test_score_count_mismatch_raises(image):
    classifier = make_classifier(FakeModel([0.5, 0.5])).load()

    with pytest.raises(ClassificationError):
        classifier.classify(image)


def test_preprocess_scales_to_minus_one_one():
    batch = preprocess_image(Image.new("L", (10, 10), 255))

    assert batch.shape == (1, 224, 224, 3)
    assert batch.dtype == np.float32
    assert batch.max() == pytest.approx(1.0)


def test_load_class_names(tmp_path):
    index = {"0": ["n01", "tabby_cat"], "1": ["n02", "water_bottle"]}
    path = tmp_path / "index.json"
    path.write_text(json.dumps(index))

    assert load_class_names(str(path)) == ["tabby cat", "water bottle"]


def test_download_uses_cached_file(tmp_path, monkeypatch):
    path = tmp_path / "weights.h5"
    path.write_bytes(b"x" * 10)

    def fail(*args, **kwargs):
        raise AssertionError("should not download")

    monkeypatch.setattr(image_classifier.requests, "get", fail)

    assert download_file("http://example.invalid/w.h5", str(path), min_size=5) == str(path)


def test_download_writes_file(tmp_path, monkeypatch):
    monkeypatch.setattr(image_classifier.requests, "get", lambda url, **kwargs: FakeResponse(b"abc" * 5000))
    path = tmp_path / "models" / "index.json"

    download_file("http://example.invalid/index.json", str(path))

    assert path.read_bytes() == b"abc" * 5000
    assert not (tmp_path / "models" / "index.json.part").exists()


def test_download_timeout(tmp_path, monkeypatch):
    def timeout(url, **kwargs):
        assert kwargs["timeout"] == 3
        raise requests.exceptions.Timeout("slow")

    monkeypatch.setattr(image_classifier.requests, "get", timeout)

    with pytest.raises(ModelUnavailableError) as excinfo:
        download_file("http://example.invalid/w.h5", str(tmp_path / "w.h5"), timeout=3)
    assert "timed out" in excinfo.value.user_message


def test_download_rejects_truncated_file(tmp_path, monkeypatch):
    monkeypatch.setattr(image_classifier.requests, "get", lambda url, **kwargs: FakeResponse(b"tiny"))
    path = tmp_path / "w.h5"

    with pytest.raises(ModelUnavailableError):
        download_file("http://example.invalid/w.h5", str(path), min_size=1000)
    assert not path.exists()


class SlowResponse(FakeResponse):
    """Sends small chunks, moving a fake clock forward before each one."""

    def __init__(self, body, clock, delay):
        super().__init__(body)
        self.clock = clock
        self.delay = delay

    def iter_content(self, chunk_size=8192):
        for byte in self.body:
            self.clock.now += self.delay
            yield bytes([byte])


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def monotonic(self):
        return self.now


def test_download_gives_up_when_the_whole_transfer_is_too_slow(tmp_path, monkeypatch):
    clock = FakeClock()
    monkeypatch.setattr(image_classifier.time, "monotonic", clock.monotonic)
    monkeypatch.setattr(
        image_classifier.requests, "get", lambda url, **kwargs: SlowResponse(b"0123456789", clock, 0.2)
    )
    path = tmp_path / "w.h5"

    with pytest.raises(ModelUnavailableError) as excinfo:
        download_file("http://example.invalid/w.h5", str(path), timeout=0.5)

    assert "timed out" in excinfo.value.user_message
    assert clock.now < 1000.0 + 2.0
    assert not path.exists()
    assert not (tmp_path / "w.h5.part").exists()
