"""Tests for HashtagInference: request building, parsing, and the non-fatal label call."""

import pytest

from hashstack.ai.prompts import CANVAS_PROFILE, VIEW_PROFILE, get_profile
from hashstack.ai.schema import ImageInput
from hashstack.ai.vision_base import MockVisionClient
from hashstack.core.config import Settings
from hashstack.core.errors import AuthError, NoHashtagsFound, RateLimited, TransportError
from hashstack.pipeline.inference import HashtagInference

pytestmark = [pytest.mark.fast]


@pytest.fixture
def image(png_bytes) -> ImageInput:
    return ImageInput(data=png_bytes, mime_type="image/png")


def test_build_request_uses_profile_and_settings(image):
    inference = HashtagInference(MockVisionClient(), Settings(model="gpt-test"))
    request = inference.build_request(image, VIEW_PROFILE)
    assert request.model == "gpt-test"
    assert request.instruction == VIEW_PROFILE.instruction
    assert request.image_url == image.data_uri()
    assert request.max_tokens == 150
    assert request.temperature == 0.3
    assert request.detail == "low"


def test_prompts_name_the_delimiter_they_are_parsed_with():
    assert "comma-separated" in VIEW_PROFILE.instruction and VIEW_PROFILE.delimiter == ","
    assert "new line" in CANVAS_PROFILE.instruction and CANVAS_PROFILE.delimiter == "\n"
    for profile in (VIEW_PROFILE, CANVAS_PROFILE):
        for topic in ("visual elements", "mood", "colors", "use cases"):
            assert topic in profile.instruction


def test_get_profile_unknown_raises():
    assert get_profile("canvas") is CANVAS_PROFILE
    with pytest.raises(ValueError):
        get_profile("poster")


def test_generate_makes_one_call_and_parses_view_profile(image):
    client = MockVisionClient(["#Beach, Sunset, ocean"])
    raw, tags = HashtagInference(client, Settings()).generate(image, VIEW_PROFILE)
    assert raw == "#Beach, Sunset, ocean"
    assert tags == ["beach", "sunset", "ocean"]
    assert len(client.requests) == 1


def test_generate_caps_canvas_profile_at_twenty(image):
    text = "\n".join(f"#tag{i}" for i in range(25))
    _, tags = HashtagInference(MockVisionClient([text]), Settings()).generate(image, CANVAS_PROFILE)
    assert len(tags) == 20


def test_generate_uses_configured_max_tag_length(image):
    settings = Settings(max_tag_length=4)
    _, tags = HashtagInference(MockVisionClient(["tiny, enormous"]), settings).generate(image, VIEW_PROFILE)
    assert tags == ["tiny"]


def test_generate_with_unparseable_text_raises(image):
    with pytest.raises(NoHashtagsFound):
        HashtagInference(MockVisionClient([" , , "]), Settings()).generate(image, VIEW_PROFILE)


def test_generate_propagates_provider_errors(image):
    with pytest.raises(AuthError):
        HashtagInference(MockVisionClient([AuthError()]), Settings()).generate(image, VIEW_PROFILE)


def test_derive_label_sends_text_only_request():
    client = MockVisionClient(['"Beach Life"\nextra commentary'])
    label = HashtagInference(client, Settings()).derive_label(["beach", "ocean"])
    assert label == "Beach Life"
    request = client.requests[0]
    assert request.image_url is None
    assert "beach, ocean" in request.instruction


def test_derive_label_truncates_long_replies():
    client = MockVisionClient(["#" + "Word " * 20])
    label = HashtagInference(client, Settings()).derive_label(["a"])
    assert 0 < len(label) <= 32
    assert not label.startswith("#")


@pytest.mark.parametrize("error", [RateLimited(), TransportError("refused"), AuthError()])
def test_derive_label_failure_is_non_fatal(error):
    label = HashtagInference(MockVisionClient([error]), Settings()).derive_label(["beach"])
    assert label == ""
