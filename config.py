# This module keeps the settings shared by the classifier, the report and the pages
# Values can be overridden with environment variables when the app is deployed

import os

# branding used on the pages and in the PDF report
APP_NAME = "EcoConvert"
BRAND_NAME = "ECOCONVERT LABS"
FOOTER_TEXT = "© 2025 EcoConvert Labs - Turning Waste into Sustainable Energy"

# MobileNetV2 weights and the ImageNet label index, fetched once and cached on disk
MODEL_WEIGHTS_URL = (
    "https://storage.googleapis.com/tensorflow/keras-applications/mobilenet_v2/"
    "mobilenet_v2_weights_tf_dim_ordering_tf_kernels_1.0_224.h5"
)
CLASS_INDEX_URL = "https://storage.googleapis.com/download.tensorflow.org/data/imagenet_class_index.json"
MODEL_CACHE_DIR = os.getenv(
    "ECOCONVERT_MODEL_CACHE_DIR",
    os.path.join(os.path.expanduser("~"), ".ecoconvert", "models"),
)
MODEL_WEIGHTS_FILE = "mobilenet_v2_imagenet.h5"
CLASS_INDEX_FILE = "imagenet_class_index.json"

# seconds before a weights download is given up (connect and read timeouts)
MODEL_DOWNLOAD_TIMEOUT = float(os.getenv("ECOCONVERT_MODEL_TIMEOUT", "60"))
# a weights file smaller than this is treated as a broken download
MIN_WEIGHTS_SIZE = 1000000

# input size expected by MobileNetV2
IMAGE_SIZE = (224, 224)
# how many ranked labels the classifier returns
TOP_K_PREDICTIONS = int(os.getenv("ECOCONVERT_TOP_K", "10"))
# how many predictions are shown in charts and in the report
DISPLAYED_PREDICTIONS = 5

# image types offered by the upload widget
ACCEPTED_IMAGE_TYPES = ["jpg", "jpeg", "png", "webp", "bmp", "gif"]
