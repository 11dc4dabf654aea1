"""
iTunes Infrastructure - Podcast directory lookup via the iTunes lookup API.
"""

from .podcast_directory import ItunesPodcastDirectory, get_podcast_directory

__all__ = [
    "ItunesPodcastDirectory",
    "get_podcast_directory",
]
