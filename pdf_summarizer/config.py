import os

from dotenv import load_dotenv

load_dotenv()

API_KEY_ENV = "HUGGINGFACE_API_KEY"

MODEL_NAME = "facebook/bart-large-cnn"
INFERENCE_URL = "https://router.huggingface.co/hf-inference/models"

# Seconds to wait on the hosted model before giving up
REQUEST_TIMEOUT = 60.0


def get_api_key() -> str | None:
    """
    Read the inference API credential from the environment (or .env file).
    """
    key = os.getenv(API_KEY_ENV, "").strip()
    return key or None
