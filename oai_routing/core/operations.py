"""Operation Catalog: the closed set of API operations and their URL paths.

Invariants:
    - Every Operation variant maps to exactly one non-empty path
    - resolve_path is total: the match has no silent fallback, only assert_never
    - Identifiers are interpolated verbatim (no escaping, no validation)
    - Fine-tuning paths carry no leading slash; they are reproduced as-is

Design Decisions:
    - Frozen dataclasses as variants: hashable, compared by value, matchable
    - Sub-operations nested under their category class (FineTuning.Cancel),
      so a call site reads like the category it targets
    - OPERATION_TYPES lists every variant; tests iterate it for golden paths
"""

from dataclasses import dataclass
from typing import Union, assert_never, get_args

from oai_routing.core.domain_types import (
    AudioCategory, ImageCategory, OperationCategory,
    JobId, FileId, ModelId,
)


# ─── Single-endpoint categories ──────────────────────────────────

@dataclass(frozen=True)
class Audio:
    """Speech-to-text: transcription or translation."""
    category: AudioCategory


@dataclass(frozen=True)
class Chat:
    """Chat completions."""


@dataclass(frozen=True)
class Embeddings:
    """Embedding vectors for input text."""


@dataclass(frozen=True)
class Image:
    """Image generation, edit, or variation."""
    category: ImageCategory


@dataclass(frozen=True)
class Moderations:
    """Content moderation classification."""


# ─── Categories with sub-operations ──────────────────────────────

class FineTuning:
    """Fine-tuning job operations. Namespace only, not instantiated."""

    @dataclass(frozen=True)
    class Create:
        pass

    @dataclass(frozen=True)
    class List:
        pass

    @dataclass(frozen=True)
    class Retrieve:
        job_id: JobId

    @dataclass(frozen=True)
    class Cancel:
        job_id: JobId

    @dataclass(frozen=True)
    class Events:
        job_id: JobId


class File:
    """Uploaded file operations. Namespace only, not instantiated."""

    @dataclass(frozen=True)
    class List:
        pass

    @dataclass(frozen=True)
    class Upload:
        pass

    @dataclass(frozen=True)
    class Delete:
        file_id: FileId

    @dataclass(frozen=True)
    class Retrieve:
        file_id: FileId

    @dataclass(frozen=True)
    class RetrieveContent:
        file_id: FileId


class Model:
    """Model listing and fine-tuned model management. Namespace only."""

    @dataclass(frozen=True)
    class List:
        pass

    @dataclass(frozen=True)
    class Retrieve:
        model_id: ModelId

    @dataclass(frozen=True)
    class DeleteFineTune:
        model_id: ModelId


Operation = Union[
    Audio,
    Chat,
    Embeddings,
    FineTuning.Create,
    FineTuning.List,
    FineTuning.Retrieve,
    FineTuning.Cancel,
    FineTuning.Events,
    File.List,
    File.Upload,
    File.Delete,
    File.Retrieve,
    File.RetrieveContent,
    Image,
    Model.List,
    Model.Retrieve,
    Model.DeleteFineTune,
    Moderations,
]

OPERATION_TYPES: tuple[type, ...] = get_args(Operation)


# ─── Resolution ──────────────────────────────────────────────────

def resolve_path(operation: Operation) -> str:
    """Map an operation to its URL path on the API host.

    Raises AssertionError (via assert_never) only for values outside the
    Operation union.
    """
    match operation:
        case Audio(category=category):
            return f"/v1/audio/{AudioCategory(category).value}"
        case Chat():
            return "/v1/chat/completions"
        case Embeddings():
            return "/v1/embeddings"
        case FineTuning.Create() | FineTuning.List():
            return "v1/fine_tuning/jobs"
        case FineTuning.Retrieve(job_id=job_id):
            return f"v1/fine_tuning/jobs/{job_id}"
        case FineTuning.Cancel(job_id=job_id):
            return f"v1/fine_tuning/jobs/{job_id}/cancel"
        case FineTuning.Events(job_id=job_id):
            return f"v1/fine_tuning/jobs/{job_id}/events"
        case File.List() | File.Upload():
            return "/v1/files"
        case File.Delete(file_id=file_id) | File.Retrieve(file_id=file_id):
            return f"/v1/files/{file_id}"
        case File.RetrieveContent(file_id=file_id):
            return f"/v1/files/{file_id}/content"
        case Image(category=category):
            return f"/v1/images/{ImageCategory(category).value}"
        case Model.List():
            return "/v1/models"
        case Model.Retrieve(model_id=model_id) | Model.DeleteFineTune(model_id=model_id):
            return f"/v1/models/{model_id}"
        case Moderations():
            return "/v1/moderations"
        case _:
            assert_never(operation)


def operation_category(operation: Operation) -> OperationCategory:
    """Top-level category an operation belongs to."""
    match operation:
        case Audio():
            return OperationCategory.AUDIO
        case Chat():
            return OperationCategory.CHAT
        case Embeddings():
            return OperationCategory.EMBEDDINGS
        case (
            FineTuning.Create() | FineTuning.List() | FineTuning.Retrieve()
            | FineTuning.Cancel() | FineTuning.Events()
        ):
            return OperationCategory.FINE_TUNING
        case (
            File.List() | File.Upload() | File.Delete() | File.Retrieve()
            | File.RetrieveContent()
        ):
            return OperationCategory.FILE
        case Image():
            return OperationCategory.IMAGE
        case Model.List() | Model.Retrieve() | Model.DeleteFineTune():
            return OperationCategory.MODEL
        case Moderations():
            return OperationCategory.MODERATIONS
        case _:
            assert_never(operation)


def operation_name(operation: Operation) -> str:
    """Dotted variant name for logs, e.g. 'FineTuning.Cancel'."""
    return type(operation).__qualname__
