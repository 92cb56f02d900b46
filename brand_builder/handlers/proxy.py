"""AWS Lambda handler proxying generate calls to Gemini.

The API key stays in the server's environment; clients only ever see the
generated content.
"""

import base64
import json
import logging

from ..clients.gemini import GeminiClient
from ..config import GEMINI_API_KEY, IMAGE_MODEL

logger = logging.getLogger(__name__)

DEFAULT_ERROR = "Failed to generate content"

_client: GeminiClient | None = None


def get_client() -> GeminiClient:
    """Build the Gemini client once per process."""
    global _client
    if _client is None:
        _client = GeminiClient(api_key=GEMINI_API_KEY)
    return _client


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def _request_method(event: dict) -> str:
    """HTTP method from an API Gateway REST (v1) or HTTP API (v2) event."""
    method = event.get("httpMethod")
    if not method:
        method = event.get("requestContext", {}).get("http", {}).get("method", "")
    return method.upper()


def handler(event, context, client: GeminiClient | None = None):
    """
    HTTP proxy for generate calls. POST only.

    Input payload:
    {
        "model": "gemini-2.5-flash-image",
        "contents": {"parts": [{"text": "..."}, {"inlineData": {"data": "...", "mimeType": "image/png"}}]}
    }

    Output: the raw Gemini response, unmodified.
    """
    if _request_method(event) != "POST":
        return _response(405, {"error": "Method not allowed"})

    try:
        body = event.get("body") or "{}"
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body).decode("utf-8")
        payload = json.loads(body)

        model = payload.get("model")
        contents = payload.get("contents")

        result = (client or get_client()).generate_content(model, contents)
        return _response(200, result)

    except Exception as e:
        logger.exception(f"API Error: {e}")
        return _response(500, {"error": str(e) or DEFAULT_ERROR})


# Local testing
if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python -m brand_builder.handlers.proxy <prompt> [model]")
        sys.exit(1)

    logging.basicConfig(level=logging.INFO)

    test_input = {
        "model": sys.argv[2] if len(sys.argv) > 2 else IMAGE_MODEL,
        "contents": {"parts": [{"text": sys.argv[1]}]},
    }
    event = {"httpMethod": "POST", "body": json.dumps(test_input)}

    result = handler(event, None)
    print(f"Status: {result['statusCode']}")
    print(result["body"][:500])
