"""Hashtag pipeline stages and the runner that composes them."""

from hashstack.pipeline.acquisition import acquire_canvas, acquire_upload, decode_data_uri
from hashstack.pipeline.inference import HashtagInference
from hashstack.pipeline.labeling import CATEGORY_TAXONOMY, label_hashtags
from hashstack.pipeline.parsing import format_hashtags, parse_hashtags
from hashstack.pipeline.runner import HashtagPipeline

__all__ = [
    "CATEGORY_TAXONOMY",
    "HashtagInference",
    "HashtagPipeline",
    "acquire_canvas",
    "acquire_upload",
    "decode_data_uri",
    "format_hashtags",
    "label_hashtags",
    "parse_hashtags",
]
