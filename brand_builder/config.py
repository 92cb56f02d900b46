import os
from dotenv import load_dotenv

load_dotenv()

# API Keys and Config - loaded from .env
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

# Generation settings
IMAGE_MODEL = os.getenv("BRAND_BUILDER_MODEL", "gemini-2.5-flash-image")
GENERATION_TIMEOUT = float(os.getenv("BRAND_BUILDER_TIMEOUT", "120"))  # seconds, per call
DEFAULT_MIME_TYPE = "image/png"

# Client-side settings
PROXY_URL = os.getenv("BRAND_BUILDER_PROXY_URL")  # e.g. "https://example.com/api/generate"
OUTPUT_DIR = os.getenv("BRAND_BUILDER_OUTPUT_DIR", "campaign")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
