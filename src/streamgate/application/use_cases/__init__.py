from .playback_session import PlaybackSessionUseCase

__all__ = ["PlaybackSessionUseCase"]
