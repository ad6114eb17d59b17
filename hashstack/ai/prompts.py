"""
Prompt profiles: the instruction sent to the model and the parser settings that must agree with it.

Each deployment context gets one profile. The delimiter the prompt asks for is the delimiter the
parser splits on, so the two live in the same object.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PromptProfile:
    name: str
    instruction: str
    delimiter: str
    max_count: int
    max_tokens: int
    temperature: float | None = None
    detail: str | None = None


VIEW_PROFILE = PromptProfile(
    name="view",
    instruction=(
        "Analyze this image and generate relevant hashtags based on what you see. "
        "Return only a comma-separated list of hashtag words (without the # symbol). "
        "Focus on objects, scenery, visual elements, colors, mood, style, and potential use cases. "
        "Limit to 8-12 hashtags."
    ),
    delimiter=",",
    max_count=12,
    max_tokens=150,
    temperature=0.3,
    detail="low",
)

CANVAS_PROFILE = PromptProfile(
    name="canvas",
    instruction=(
        "Analyze this image and generate relevant hashtags for social media. "
        "Focus on: visual elements, colors, style, mood, objects, themes, and potential use cases. "
        "Return 15-25 hashtags as a simple list, each on a new line, starting with #. "
        "Make them specific and useful for discoverability."
    ),
    delimiter="\n",
    max_count=20,
    max_tokens=500,
)

PROFILES: dict[str, PromptProfile] = {p.name: p for p in (VIEW_PROFILE, CANVAS_PROFILE)}

LABEL_INSTRUCTION = (
    "Here are hashtags generated for one image:\n{hashtags}\n\n"
    "Reply with a short category label (one to three words, Title Case) that summarizes them. "
    "Reply with the label only, no punctuation and no # symbol."
)
LABEL_MAX_TOKENS = 20
LABEL_MAX_LENGTH = 32


def get_profile(name: str) -> PromptProfile:
    """Return the prompt profile by name; raises ValueError for unknown names."""
    try:
        return PROFILES[name]
    except KeyError:
        raise ValueError(f"Unknown prompt profile: {name}") from None
