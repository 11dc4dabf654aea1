"""
Dependency Injection Container.

This module provides a simple DI container for managing interface implementations.
"""

from typing import Any, Callable, Dict, Type, TypeVar

from core.logger import format_exception_short, logger

T = TypeVar("T")


class Container:
    """
    Simple Dependency Injection Container.

    Supports:
    - Singleton instances (register)
    - Factory functions (register_factory)
    - Interface resolution (resolve)
    """

    _instances: Dict[Type, Any] = {}
    _providers: Dict[Type, Callable[[], Any]] = {}
    _initialized: bool = False

    @classmethod
    def register(cls, interface: Type[T], instance: Any) -> None:
        """
        Register a singleton instance for an interface.

        Args:
            interface: The interface type (e.g., IPodcastDirectory)
            instance: The implementation instance
        """
        cls._instances[interface] = instance

    @classmethod
    def register_factory(cls, interface: Type[T], factory: Callable[[], T]) -> None:
        """
        Register a factory function for an interface.
        Factory is called each time resolve() is called.

        Args:
            interface: The interface type
            factory: Factory function that returns an implementation
        """
        cls._providers[interface] = factory

    @classmethod
    def resolve(cls, interface: Type[T]) -> T:
        """
        Resolve an interface to its implementation.

        Registered instances take precedence over factories, so tests can
        register doubles on top of a bootstrapped container.

        Raises:
            KeyError: If no implementation is registered for the interface
        """
        if interface in cls._instances:
            return cls._instances[interface]
        if interface in cls._providers:
            return cls._providers[interface]()
        raise KeyError(f"No provider registered for {interface.__name__}")

    @classmethod
    def is_registered(cls, interface: Type[T]) -> bool:
        return interface in cls._instances or interface in cls._providers

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations (useful for testing)."""
        cls._instances.clear()
        cls._providers.clear()
        cls._initialized = False

    @classmethod
    def is_initialized(cls) -> bool:
        """Check if container has been bootstrapped."""
        return cls._initialized

    @classmethod
    def _mark_initialized(cls) -> None:
        cls._initialized = True


def bootstrap_container() -> None:
    """
    Initialize the dependency injection container.

    Registers all interface implementations:
    - IAppLogger -> LoguruAppLogger
    - IPodcastDirectory -> ItunesPodcastDirectory
    - ITranscriptionProvider -> AssemblyAITranscriptionProvider
    - IScreenshotExtractor -> VisionScreenshotExtractor
    - UploadStager, TranscriptService, ExtractService (with injected dependencies)

    This function is idempotent - calling it multiple times has no effect
    after the first successful initialization.
    """
    if Container.is_initialized():
        return

    logger.info("Bootstrapping dependency injection container...")

    try:
        # Import interfaces
        from interfaces.app_logger import IAppLogger
        from interfaces.podcast_directory import IPodcastDirectory
        from interfaces.screenshot_extractor import IScreenshotExtractor
        from interfaces.transcription_provider import ITranscriptionProvider

        # Import implementations
        from infrastructure.assemblyai.transcription_provider import (
            get_transcription_provider,
        )
        from infrastructure.itunes.podcast_directory import get_podcast_directory
        from infrastructure.logging.loguru_logger import get_app_logger
        from infrastructure.vision.screenshot_extractor import get_screenshot_extractor

        # Import services
        from services.extraction import ExtractService
        from services.transcript import TranscriptService
        from services.upload import UploadStager

        # Collaborators (singletons via factory)
        Container.register_factory(IAppLogger, get_app_logger)
        logger.info("Registered IAppLogger -> LoguruAppLogger (factory)")

        Container.register_factory(IPodcastDirectory, get_podcast_directory)
        logger.info("Registered IPodcastDirectory -> ItunesPodcastDirectory (factory)")

        Container.register_factory(ITranscriptionProvider, get_transcription_provider)
        logger.info(
            "Registered ITranscriptionProvider -> AssemblyAITranscriptionProvider (factory)"
        )

        Container.register_factory(IScreenshotExtractor, get_screenshot_extractor)
        logger.info("Registered IScreenshotExtractor -> VisionScreenshotExtractor (factory)")

        # Services with injected dependencies
        def create_upload_stager() -> UploadStager:
            return UploadStager(app_logger=Container.resolve(IAppLogger))

        def create_transcript_service() -> TranscriptService:
            return TranscriptService(
                podcast_directory=Container.resolve(IPodcastDirectory),
                transcription_provider=Container.resolve(ITranscriptionProvider),
                app_logger=Container.resolve(IAppLogger),
            )

        def create_extract_service() -> ExtractService:
            return ExtractService(
                extractor=Container.resolve(IScreenshotExtractor),
                app_logger=Container.resolve(IAppLogger),
            )

        Container.register_factory(UploadStager, create_upload_stager)
        Container.register_factory(TranscriptService, create_transcript_service)
        Container.register_factory(ExtractService, create_extract_service)
        logger.info("Registered UploadStager, TranscriptService, ExtractService with DI (factory)")

        Container._mark_initialized()
        logger.info("Dependency injection container bootstrapped successfully")

    except Exception as e:
        logger.error(format_exception_short(e, "Failed to bootstrap container"))
        logger.exception("Container bootstrap error details:")
        raise


def _resolve(interface: Type[T]) -> T:
    if not Container.is_initialized():
        bootstrap_container()
    return Container.resolve(interface)


def get_app_logger():
    """Get IAppLogger implementation from container."""
    from interfaces.app_logger import IAppLogger

    return _resolve(IAppLogger)


def get_podcast_directory():
    """Get IPodcastDirectory implementation from container."""
    from interfaces.podcast_directory import IPodcastDirectory

    return _resolve(IPodcastDirectory)


def get_transcription_provider():
    """Get ITranscriptionProvider implementation from container."""
    from interfaces.transcription_provider import ITranscriptionProvider

    return _resolve(ITranscriptionProvider)


def get_screenshot_extractor():
    """Get IScreenshotExtractor implementation from container."""
    from interfaces.screenshot_extractor import IScreenshotExtractor

    return _resolve(IScreenshotExtractor)


def get_upload_stager():
    """Get UploadStager from container."""
    from services.upload import UploadStager

    return _resolve(UploadStager)


def get_transcript_service():
    """Get TranscriptService from container."""
    from services.transcript import TranscriptService

    return _resolve(TranscriptService)


def get_extract_service():
    """Get ExtractService from container."""
    from services.extraction import ExtractService

    return _resolve(ExtractService)
