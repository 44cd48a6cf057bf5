"""
Application Layer

Contains use cases, command handlers, and application services.
This layer orchestrates domain objects and infrastructure to fulfill use cases.

Structure:
- commands/: write operations (AddToQueueCommand)
- services/: playback controller, search orchestration, presentation bridge
- interfaces/: Port interfaces for infrastructure adapters
"""
