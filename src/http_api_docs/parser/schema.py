"""Endpoint schema loader.

Reads a YAML or JSON dump of the API's command tree into Endpoint models.
"""

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from .base import Endpoint


class SchemaError(ValueError):
    """Raised when a schema file cannot be turned into endpoints."""


class ApiSchema(BaseModel):
    """Endpoints plus the version of the API they were extracted from."""

    version: str | None = None
    endpoints: list[Endpoint]


class _TextLoader(yaml.SafeLoader):
    """SafeLoader that keeps numbers and booleans as written (0.10 stays "0.10")."""


_TextLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag not in ("tag:yaml.org,2002:int", "tag:yaml.org,2002:float", "tag:yaml.org,2002:bool")
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_schema(file_path: Path) -> ApiSchema:
    """Load an endpoint schema file.

    Accepts either a bare list of endpoints or a mapping with an
    ``endpoints`` list and an optional ``version``. Scalars are kept
    as written; only ``response`` bodies are read with native types.
    """
    try:
        text = file_path.read_text(encoding="utf-8")
        doc = yaml.load(text, Loader=_TextLoader)
        typed = yaml.safe_load(text)
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaError(f"{file_path}: cannot read schema: {e}") from e
    except yaml.YAMLError as e:
        raise SchemaError(f"{file_path}: not valid YAML/JSON: {e}") from e

    if isinstance(doc, list):
        doc, typed = {"endpoints": doc}, {"endpoints": typed}
    if not isinstance(doc, dict) or not isinstance(doc.get("endpoints"), list):
        raise SchemaError(f"{file_path}: expected a list of endpoints or a mapping with 'endpoints'")

    version = doc.get("version")
    try:
        endpoints = [
            _parse_endpoint(item, typed_item)
            for item, typed_item in zip(doc["endpoints"], typed["endpoints"])
        ]
        return ApiSchema(version=version, endpoints=endpoints)
    except (ValidationError, TypeError, ValueError) as e:
        raise SchemaError(f"{file_path}: invalid endpoint definition: {e}") from e


def _parse_endpoint(item: dict, typed_item: dict) -> Endpoint:
    data = dict(item)
    name = data.get("name", "")

    # Response bodies are example JSON, so numbers must stay numbers
    response = typed_item.get("response")
    if response is None:
        data["response"] = ""
    elif not isinstance(response, str):
        data["response"] = json.dumps(response, indent=2)

    for key in ("arguments", "options"):
        data[key] = [_with_endpoint(arg, name) for arg in data.get(key) or []]

    return Endpoint(**data)


def _with_endpoint(arg: dict, endpoint_name: str) -> dict:
    arg = dict(arg)
    if not arg.get("endpoint"):
        arg["endpoint"] = endpoint_name
    if arg.get("default") is None:
        arg["default"] = ""
    return arg
