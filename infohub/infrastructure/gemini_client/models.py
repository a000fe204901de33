# infohub/infrastructure/gemini_client/models.py

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Part(BaseModel):
    text: Optional[str] = None


class Content(BaseModel):
    role: Optional[str] = None
    parts: List[Part] = Field(default_factory=list)


class GenerationConfig(BaseModel):
    """Output constraints sent with a request."""
    response_mime_type: str = Field("application/json", serialization_alias="responseMimeType")
    response_schema: Dict[str, Any] = Field(..., serialization_alias="responseSchema")


class GenerateContentRequest(BaseModel):
    """Body of a ``models/{model}:generateContent`` call.

    Attributes:
        contents (List[Content]): The conversation, here a single user turn.
        generation_config (GenerationConfig): Requested output format.
    """
    contents: List[Content]
    generation_config: GenerationConfig = Field(..., serialization_alias="generationConfig")

    @classmethod
    def for_prompt(cls, prompt: str, schema: Dict[str, Any]) -> "GenerateContentRequest":
        """Build a single-turn request asking for JSON shaped by ``schema``."""
        return cls(
            contents=[Content(role="user", parts=[Part(text=prompt)])],
            generation_config=GenerationConfig(response_schema=schema),
        )

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class Candidate(BaseModel):
    content: Optional[Content] = None
    finish_reason: Optional[str] = Field(None, alias="finishReason")


class GenerateContentResponse(BaseModel):
    """Envelope returned by ``generateContent``; unknown fields are ignored."""
    candidates: List[Candidate] = Field(default_factory=list)

    @property
    def text(self) -> Optional[str]:
        """Concatenated text parts of the first candidate, or None if there are none."""
        if not self.candidates or self.candidates[0].content is None:
            return None
        texts = [part.text for part in self.candidates[0].content.parts if part.text]
        if not texts:
            return None
        return "".join(texts)
