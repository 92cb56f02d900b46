import base64
import binascii

_EXTENSIONS = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/webp": "webp",
    "image/gif": "gif",
}


def decode_base64(data: str) -> bytes:
    """Decode standard or URL-safe base64, tolerating missing padding.

    Raises ValueError on malformed input.
    """
    normalized = data.strip().replace("-", "+").replace("_", "/")
    normalized += "=" * (-len(normalized) % 4)
    try:
        return base64.b64decode(normalized, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 image data: {e}") from e


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def extension_for(mime_type: str) -> str:
    """Map an image MIME type to a file extension.

    Example: "image/jpeg" -> "jpg"
    """
    return _EXTENSIONS.get(mime_type.lower(), "png")
