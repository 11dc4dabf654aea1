"""
Screenshot Extractor Interface - Extracts podcast metadata from images.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union


class IScreenshotExtractor(ABC):
    """
    Abstract interface for extracting podcast/episode info from a screenshot.

    Implementations:
    - infrastructure.vision.screenshot_extractor.VisionScreenshotExtractor
    """

    @abstractmethod
    async def extract(self, image_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Extract podcast info from a staged image file.

        Args:
            image_path: Path to the staged image

        Returns:
            Extracted info (podcast title, episode title, timestamp, raw text)

        Raises:
            CredentialsError: If the OCR service is not configured
            UpstreamServiceError: If the OCR service fails
        """
        pass
