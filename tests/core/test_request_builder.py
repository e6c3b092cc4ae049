"""Request Builder: URL composition, headers, query strings and JSON bodies.

Tests cover:
    - End-to-end scenarios (chat, file retrieve, fine-tuning cancel, model list)
    - Authorization header is always "Bearer " + api_key
    - Only Content-Type and Authorization headers are set
    - Empty/None query items produce no query string; pairs keep their order
    - Payloads encode to compact JSON; no payload means no body
    - SerializationError and MalformedURLError surface with context
    - Method is taken as given, never checked against conventions
"""

import json
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from oai_routing.core.domain_types import HttpMethod, ImageCategory
from oai_routing.core.errors import MalformedURLError, SerializationError
from oai_routing.core.operations import (
    Chat, Embeddings, File, FineTuning, Image, Model,
)
from oai_routing.core.request_builder import (
    BASE_URL, RequestDescriptor, build, build_url, encode_payload,
)


class ChatParameters(BaseModel):
    model: str
    temperature: float | None = None
    user: str | None = None


@dataclass
class EmbeddingParameters:
    model: str
    input: list[str]


# ─── Scenarios ───────────────────────────────────────────────────

def test_chat_request_with_payload():
    req = build(Chat(), api_key="sk-test", method=HttpMethod.POST, payload={"model": "gpt-4"})
    assert req.url == "https://api.openai.com/v1/chat/completions"
    assert req.method is HttpMethod.POST
    assert req.headers["Authorization"] == "Bearer sk-test"
    assert req.headers["Content-Type"] == "application/json"
    assert req.body == b'{"model":"gpt-4"}'


def test_file_retrieve_has_no_body():
    req = build(File.Retrieve("file-123"), api_key="k", method=HttpMethod.GET)
    assert req.url == "https://api.openai.com/v1/files/file-123"
    assert req.method is HttpMethod.GET
    assert req.body is None


def test_fine_tuning_cancel_resolves_relative_to_base():
    req = build(FineTuning.Cancel("job-9"), api_key="k", method=HttpMethod.POST)
    assert req.url == "https://api.openai.com/v1/fine_tuning/jobs/job-9/cancel"
    assert req.body is None


def test_model_list_with_limit_query():
    req = build(Model.List(), api_key="k", method=HttpMethod.GET, query_items=[("limit", "5")])
    assert req.url == "https://api.openai.com/v1/models?limit=5"


# ─── Headers ─────────────────────────────────────────────────────

@pytest.mark.parametrize("api_key", ["sk-test", "k", "sk-proj-abc_DEF-123"])
def test_authorization_header_is_bearer_key(api_key):
    req = build(Embeddings(), api_key=api_key, method=HttpMethod.POST)
    assert req.headers["Authorization"] == "Bearer " + api_key


def test_only_two_headers_are_set():
    req = build(Chat(), api_key="k", method=HttpMethod.POST)
    assert set(req.headers) == {"Content-Type", "Authorization"}


def test_headers_are_read_only():
    req = build(Chat(), api_key="k", method=HttpMethod.POST)
    with pytest.raises(TypeError):
        req.headers["X-Extra"] = "1"


# ─── Query strings ───────────────────────────────────────────────

@pytest.mark.parametrize("query_items", [None, [], ()])
def test_no_query_items_means_no_query_string(query_items):
    req = build(Model.List(), api_key="k", method=HttpMethod.GET, query_items=query_items)
    assert req.url == "https://api.openai.com/v1/models"
    assert "?" not in req.url


def test_query_items_keep_order():
    url = build_url(
        FineTuning.Events("ftjob-1"),
        [("limit", "20"), ("after", "ftevent-7")],
    )
    assert url == "https://api.openai.com/v1/fine_tuning/jobs/ftjob-1/events?limit=20&after=ftevent-7"


def test_repeated_keys_are_not_regrouped():
    url = build_url(File.List(), [("a", "1"), ("b", "2"), ("a", "3")])
    assert url.endswith("/v1/files?a=1&b=2&a=3")


def test_query_values_are_encoded():
    url = build_url(File.List(), [("purpose", "fine tune&more")])
    query = url.split("?", 1)[1]
    assert query == "purpose=fine%20tune%26more"
    assert "+" not in query


# ─── Bodies ──────────────────────────────────────────────────────

def test_body_is_compact_json_in_key_order():
    payload = {"model": "gpt-4", "messages": [{"role": "user", "content": "hi"}]}
    req = build(Chat(), api_key="k", method=HttpMethod.POST, payload=payload)
    assert req.body == b'{"model":"gpt-4","messages":[{"role":"user","content":"hi"}]}'
    assert json.loads(req.body) == payload


def test_pydantic_payload_drops_none_fields():
    req = build(Chat(), api_key="k", method=HttpMethod.POST, payload=ChatParameters(model="gpt-4"))
    assert req.body == b'{"model":"gpt-4"}'


def test_dataclass_payload_encodes():
    body = encode_payload(EmbeddingParameters(model="text-embedding-3-small", input=["a", "b"]))
    assert json.loads(body) == {"model": "text-embedding-3-small", "input": ["a", "b"]}


def test_non_ascii_payload_is_utf8():
    body = encode_payload({"prompt": "café"})
    assert body.decode("utf-8") == '{"prompt":"café"}'


def test_unserializable_payload_raises_serialization_error():
    with pytest.raises(SerializationError) as exc_info:
        build(
            Image(ImageCategory.GENERATIONS), api_key="k",
            method=HttpMethod.POST, payload={"prompt": object()},
        )
    err = exc_info.value
    assert err.code == "SERIALIZATION_ERROR"
    assert err.payload_type == "dict"
    assert err.context.operation == "Image"
    assert err.context.method == "POST"
    assert err.__cause__ is not None


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_float_in_dict_raises_serialization_error(value):
    with pytest.raises(SerializationError) as exc_info:
        build(
            Chat(), api_key="k", method=HttpMethod.POST,
            payload={"model": "gpt-4", "temperature": value},
        )
    err = exc_info.value
    assert "$.temperature" in err.message
    assert err.payload_type == "dict"
    assert err.context.operation == "Chat"


def test_non_finite_float_nested_in_list_raises():
    with pytest.raises(SerializationError) as exc_info:
        encode_payload({"input": [[0.1, float("nan")]]})
    assert "$.input[0][1]" in exc_info.value.message


def test_non_finite_float_in_pydantic_model_raises():
    with pytest.raises(SerializationError) as exc_info:
        build(
            Chat(), api_key="k", method=HttpMethod.POST,
            payload=ChatParameters(model="gpt-4", temperature=float("nan")),
        )
    assert exc_info.value.payload_type == "ChatParameters"
    assert "$.temperature" in exc_info.value.message


def test_finite_floats_still_encode():
    body = encode_payload(ChatParameters(model="gpt-4", temperature=0.2))
    assert json.loads(body) == {"model": "gpt-4", "temperature": 0.2}


# ─── Method and URL failures ─────────────────────────────────────

def test_method_is_not_validated_against_operation():
    req = build(File.Retrieve("file-1"), api_key="k", method=HttpMethod.GET, payload={"x": 1})
    assert req.method is HttpMethod.GET
    assert req.body == b'{"x":1}'


def test_method_accepts_raw_verb_string():
    req = build(File.Delete("file-1"), api_key="k", method="DELETE")
    assert req.method is HttpMethod.DELETE


def test_unknown_method_rejected():
    with pytest.raises(ValueError):
        build(Chat(), api_key="k", method="PATCH")


def test_control_character_in_identifier_raises_malformed_url():
    with pytest.raises(MalformedURLError) as exc_info:
        build(File.Retrieve("bad\nid"), api_key="k", method=HttpMethod.GET)
    err = exc_info.value
    assert err.code == "MALFORMED_URL"
    assert err.path == "/v1/files/bad\nid"
    assert err.context.operation == "File.Retrieve"


# ─── Descriptor value semantics ──────────────────────────────────

def test_descriptor_equality_by_fields():
    a = build(Model.Retrieve("gpt-4"), api_key="k", method=HttpMethod.GET)
    b = build(Model.Retrieve("gpt-4"), api_key="k", method=HttpMethod.GET)
    assert a == b
    assert a is not b


def test_descriptor_is_frozen():
    req = build(Chat(), api_key="k", method=HttpMethod.POST)
    with pytest.raises(AttributeError):
        req.url = "https://example.com"


def test_every_url_starts_with_base():
    req = build(FineTuning.List(), api_key="k", method=HttpMethod.GET)
    assert req.url.startswith(BASE_URL + "/")
    assert isinstance(req, RequestDescriptor)
