"""
Application Interfaces (Ports)

Abstract interfaces that define contracts between the application
layer and infrastructure adapters. These are the "ports" in
hexagonal architecture.
"""

from preview_jukebox.application.interfaces.audio_output import AudioOutput
from preview_jukebox.application.interfaces.catalog_client import CatalogClient
from preview_jukebox.application.interfaces.presenter import Presenter

__all__ = [
    "AudioOutput",
    "CatalogClient",
    "Presenter",
]
