"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Catalog (iTunes Search API over httpx)
- Audio (ffplay / ffprobe subprocesses)
- Console (terminal presenter and input loop)
"""
