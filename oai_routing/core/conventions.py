"""Method Conventions: the HTTP verb the remote API documents per operation.

Invariants:
    - Total over the Operation union, same exhaustiveness rule as resolve_path
    - Advisory only: build() never checks a method against this table
"""

from typing import assert_never

from oai_routing.core.domain_types import HttpMethod
from oai_routing.core.operations import (
    Audio, Chat, Embeddings, FineTuning, File, Image, Model, Moderations,
    Operation,
)


def conventional_method(operation: Operation) -> HttpMethod:
    """Return the documented verb for an operation."""
    match operation:
        case Audio() | Chat() | Embeddings() | Image() | Moderations():
            return HttpMethod.POST
        case FineTuning.Create() | FineTuning.Cancel():
            return HttpMethod.POST
        case FineTuning.List() | FineTuning.Retrieve() | FineTuning.Events():
            return HttpMethod.GET
        case File.Upload():
            return HttpMethod.POST
        case File.List() | File.Retrieve() | File.RetrieveContent():
            return HttpMethod.GET
        case File.Delete():
            return HttpMethod.DELETE
        case Model.List() | Model.Retrieve():
            return HttpMethod.GET
        case Model.DeleteFineTune():
            return HttpMethod.DELETE
        case _:
            assert_never(operation)
