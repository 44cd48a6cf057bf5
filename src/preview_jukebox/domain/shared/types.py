"""Reusable Pydantic Annotated types for domain-wide validation.

Every constrained type used across the application is defined here once,
so models can simply annotate their fields::

    from preview_jukebox.domain.shared.types import NonEmptyStr, PercentFloat

    class MyModel(BaseModel):
        query: NonEmptyStr
        percent: PercentFloat
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BeforeValidator, Field

from preview_jukebox.domain.shared.datetime_utils import ensure_utc

# ── Numeric constraints ─────────────────────────────────────────────

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""

PositiveFloat = Annotated[float, Field(gt=0.0)]
"""Float > 0.0."""

PercentFloat = Annotated[float, Field(ge=0.0, le=100.0)]
"""Progress percentage in [0.0, 100.0]."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""


# ── Settings-specific constraints ──────────────────────────────────

SearchLimit = Annotated[int, Field(gt=0, le=200)]
"""Catalog result cap: 1 … 200 (the provider's own maximum)."""

DebounceMs = Annotated[int, Field(ge=0, le=10_000)]
"""Search input debounce in milliseconds: 0 … 10 000."""


# ── Datetime constraints ────────────────────────────────────────────

UtcDatetimeField = Annotated[datetime, BeforeValidator(ensure_utc)]
"""Timezone-aware datetime, normalised to UTC on input."""
