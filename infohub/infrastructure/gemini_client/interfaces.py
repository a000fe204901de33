# infohub/infrastructure/gemini_client/interfaces.py

from abc import ABC, abstractmethod
from typing import Any, Dict


class IContentGenerator(ABC):
    """Interface for a generative-content service.

    The single operation sends a prompt together with a JSON response schema
    and returns the reply text, which is expected (but not guaranteed) to be
    JSON conforming to that schema.
    """

    @abstractmethod
    async def generate_content(self, model: str, prompt: str, schema: Dict[str, Any]) -> str:
        """Generate structured content.

        Args:
            model (str): Model identifier, e.g. 'gemini-2.5-flash'.
            prompt (str): Natural-language prompt.
            schema (Dict[str, Any]): Response schema with a 'required' field list.

        Returns:
            str: The reply text.

        Raises:
            ContentGenerationError: If no reply text could be obtained.
        """
        pass
