"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - JobId, FileId, ModelId wrap str; they are opaque and never validated
    - Category raw values equal the URL segment they produce
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers for identifiers
    - str Enums: values drop straight into paths and JSON log fields
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

JobId = NewType("JobId", str)
FileId = NewType("FileId", str)
ModelId = NewType("ModelId", str)


# ─── Enums ───────────────────────────────────────────────────────

class HttpMethod(str, Enum):
    """HTTP verbs the API uses. Closed set."""
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class AudioCategory(str, Enum):
    """Audio endpoints under /v1/audio/."""
    TRANSCRIPTIONS = "transcriptions"
    TRANSLATIONS = "translations"


class ImageCategory(str, Enum):
    """Image endpoints under /v1/images/."""
    GENERATIONS = "generations"
    EDITS = "edits"
    VARIATIONS = "variations"


class OperationCategory(str, Enum):
    """Top-level operation groups, one per URL namespace."""
    AUDIO = "audio"
    CHAT = "chat"
    EMBEDDINGS = "embeddings"
    FINE_TUNING = "fine_tuning"
    FILE = "file"
    IMAGE = "image"
    MODEL = "model"
    MODERATIONS = "moderations"
