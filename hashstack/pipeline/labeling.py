"""Category label heuristic: pick the taxonomy category whose keywords best match the hashtags."""

from collections.abc import Sequence
from typing import Literal, get_args

LabelMode = Literal["heuristic", "model", "none"]
LABEL_MODES: tuple[str, ...] = get_args(LabelMode)

# Order matters: on equal match counts the earlier category wins.
CATEGORY_TAXONOMY: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Beach/Ocean", ("beach", "ocean", "sea", "waves", "sand", "tropical", "coastline", "shore", "surfing")),
    ("Nature", ("nature", "forest", "trees", "mountains", "hiking", "wilderness", "outdoor", "landscape")),
    ("Food", ("food", "delicious", "cuisine", "restaurant", "cooking", "meal", "dining", "tasty")),
    ("City/Urban", ("city", "urban", "architecture", "building", "street", "downtown", "skyline")),
    ("Animals", ("pet", "dog", "cat", "animal", "wildlife", "cute", "furry", "puppy", "kitten")),
    ("Travel", ("travel", "vacation", "adventure", "journey", "explore", "destination", "trip")),
    ("Photography", ("photography", "photo", "camera", "artistic", "creative", "visual", "capture")),
    ("Sports", ("sports", "fitness", "exercise", "athletic", "game", "competition", "training")),
    ("Art", ("art", "artistic", "creative", "design", "painting", "drawing", "colorful")),
    ("Technology", ("tech", "technology", "digital", "modern", "innovation", "electronic")),
)


def _keyword_matches(keywords: Sequence[str], tags: Sequence[str]) -> int:
    """Count keywords that are a substring of some tag, or contain some tag as a substring."""
    return sum(1 for keyword in keywords if any(keyword in tag or tag in keyword for tag in tags))


def label_hashtags(
    tags: Sequence[str],
    taxonomy: Sequence[tuple[str, Sequence[str]]] = CATEGORY_TAXONOMY,
) -> str:
    """
    Return the category with strictly the most keyword matches; earliest category wins ties.

    With no matches at all, the first tag with its first letter upper-cased is the label.
    An empty tag list yields an empty label.
    """
    lowered = [tag.lower() for tag in tags if tag]
    if not lowered:
        return ""
    best_category = ""
    max_matches = 0
    for category, keywords in taxonomy:
        matches = _keyword_matches(keywords, lowered)
        if matches > max_matches:
            max_matches = matches
            best_category = category
    if max_matches == 0:
        first = next(tag for tag in tags if tag)
        return first[:1].upper() + first[1:]
    return best_category
