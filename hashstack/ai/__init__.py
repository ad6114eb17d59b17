"""AI module: data contracts, prompt profiles and vision completion clients."""

from hashstack.ai.schema import ImageInput, InferenceRequest, InferenceResponse, PipelineRun
from hashstack.ai.prompts import CANVAS_PROFILE, VIEW_PROFILE, PromptProfile, get_profile
from hashstack.ai.vision_base import BaseVisionClient, MockVisionClient
from hashstack.ai.factory import get_vision_client

__all__ = [
    "BaseVisionClient",
    "CANVAS_PROFILE",
    "ImageInput",
    "InferenceRequest",
    "InferenceResponse",
    "MockVisionClient",
    "PipelineRun",
    "PromptProfile",
    "VIEW_PROFILE",
    "get_profile",
    "get_vision_client",
]
