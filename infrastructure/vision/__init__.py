"""
Vision Infrastructure - Screenshot text detection via Google Cloud Vision.
"""

from .screenshot_extractor import VisionScreenshotExtractor, get_screenshot_extractor

__all__ = [
    "VisionScreenshotExtractor",
    "get_screenshot_extractor",
]
