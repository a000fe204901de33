# infohub/infrastructure/gemini_client/__init__.py

"""
Gemini Client Package

This package provides a client for the Gemini generateContent API.
It includes the interface, request/response models, and the client
implementation.
"""

from .interfaces import IContentGenerator
from .models import GenerateContentRequest, GenerateContentResponse
from .client import GeminiClient

__all__ = [
    "IContentGenerator",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "GeminiClient",
]
