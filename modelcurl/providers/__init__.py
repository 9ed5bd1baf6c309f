"""
Provider rules: model-name detection, request-body shaping and response
parsing for the supported reasoning-model families.
"""

from .detection import detect_provider, is_reasoning_model
from .parsing import parse_model_list, parse_response, parse_response_text
from .shaping import SHAPERS, shape_request

__all__ = [
    "detect_provider",
    "is_reasoning_model",
    "parse_model_list",
    "parse_response",
    "parse_response_text",
    "SHAPERS",
    "shape_request",
]
