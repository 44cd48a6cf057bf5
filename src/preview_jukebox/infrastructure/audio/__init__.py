"""Audio output adapters."""

from preview_jukebox.infrastructure.audio.ffplay_output import FfplayAudioOutput, PlayerState

__all__ = [
    "FfplayAudioOutput",
    "PlayerState",
]
