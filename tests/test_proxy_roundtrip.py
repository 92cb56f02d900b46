"""ProxyClient -> Lambda handler -> GeminiClient, with only the SDK transport faked."""

import json
from types import SimpleNamespace

import pytest
from google.genai import types

from brand_builder.clients import GeminiClient, GenerationError, ProxyClient
from brand_builder.clients import proxy as proxy_module
from brand_builder.handlers.proxy import handler
from brand_builder.models import ImagePart, InlineImage, TextPart

URL = "https://example.test/api/generate"

# Bytes whose base64 form contains both '+' and '/'
EDITED_BYTES = b"\xfb\xff\xbf\x00edited"


class FakeModels:
    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return self.response


class LambdaResponse:
    """requests.Response stand-in built from a handler result."""

    def __init__(self, result: dict):
        self.status_code = result["statusCode"]
        self._body = result["body"]

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self):
        return json.loads(self._body)


@pytest.fixture
def models(monkeypatch):
    """Route ProxyClient's requests.post through the handler, backed by a faked SDK."""
    fake = FakeModels()
    gemini = GeminiClient(api_key=None, model="server-model", client=SimpleNamespace(models=fake))

    def post(url, **kwargs):
        assert url == URL
        event = {"httpMethod": "POST", "body": json.dumps(kwargs["json"])}
        return LambdaResponse(handler(event, None, client=gemini))

    monkeypatch.setattr(proxy_module.requests, "post", post)
    return fake


def _response(*parts: types.Part) -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=list(parts)))]
    )


def test_image_survives_round_trip(models):
    models.response = _response(
        types.Part(text="Here is the billboard"),
        types.Part(inline_data=types.Blob(data=EDITED_BYTES, mime_type="image/jpeg")),
    )
    base = InlineImage(b"\x89PNG\xfb\xff base", "image/png")

    result = ProxyClient(URL, model="client-model").generate(None, [ImagePart(base), TextPart("billboard")])

    assert result.image == InlineImage(EDITED_BYTES, "image/jpeg")

    call = models.calls[0]
    assert call["model"] == "client-model"
    sent = call["contents"]
    assert sent.parts[0].inline_data.data == base.data
    assert sent.parts[0].inline_data.mime_type == "image/png"
    assert sent.parts[1].text == "billboard"


def test_no_image_round_trip(models):
    models.response = _response(types.Part(text="I can't draw that"))

    assert ProxyClient(URL).generate(None, [TextPart("a lamp")]).image is None


def test_server_error_round_trip(models):
    models.error = RuntimeError("API key not valid")

    with pytest.raises(GenerationError, match="API key not valid"):
        ProxyClient(URL).generate(None, [TextPart("a lamp")])
