"""Share documents: JSON loading, schema validation, typed records.

A document looks like::

    {"keys": {"n": 4, "k": 3},
     "1": {"base": "10", "value": "4"},
     "2": {"base": "2", "value": "111"}}

Every key except RESERVED_KEY is an x-coordinate; its value holds the base
and the digit string of y.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from core.errors import InvalidDocument
from core.radix import decode

logger = logging.getLogger(__name__)

RESERVED_KEY = "keys"
SCHEMA_NAME = "share_document"


class SchemaLoader:
    """Loads and caches JSON Schema files from shares/schema/."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


class DocumentValidator:
    """Validates a deserialized share document against the JSON Schema."""

    def __init__(self, schema_name: str = SCHEMA_NAME):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """Raise InvalidDocument for the first (most relevant) schema violation."""
        error = best_match(self.validator.iter_errors(data))
        if error is not None:
            raise InvalidDocument(error.message, error.json_path) from error

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)


@dataclass(frozen=True)
class SharePoint:
    """A decoded sample point (x, y)."""
    x: int
    y: int


@dataclass(frozen=True)
class ShareEntry:
    """One undecoded share: y is `value` written in `base`."""
    x: int
    base: int
    value: str

    def decode(self) -> SharePoint:
        return SharePoint(self.x, decode(self.value, self.base))


@dataclass(frozen=True)
class ShareDocument:
    n: int
    k: int
    entries: tuple[ShareEntry, ...]

    def points(self) -> list[SharePoint]:
        """Decoded points in document order."""
        return [entry.decode() for entry in self.entries]


def parse_document(data: Dict[str, Any]) -> ShareDocument:
    """Validate and convert an already deserialized document."""
    DocumentValidator().validate(data)

    keys = data[RESERVED_KEY]
    entries = []
    seen: dict[int, str] = {}
    for key, share in data.items():
        if key == RESERVED_KEY:
            continue
        x = int(key)
        if x in seen:
            raise InvalidDocument(
                f"keys {seen[x]!r} and {key!r} name the same x-coordinate", f"$['{key}']")
        seen[x] = key
        entries.append(ShareEntry(x=x, base=int(share["base"]), value=share["value"]))

    document = ShareDocument(n=int(keys["n"]), k=int(keys["k"]), entries=tuple(entries))
    if document.n != len(entries):
        logger.info("document declares n=%d but holds %d shares", document.n, len(entries))
    return document


def load_document(path) -> ShareDocument:
    """Read a UTF-8 JSON share document from disk."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidDocument(f"malformed JSON: {e.msg} (line {e.lineno})") from e
        except UnicodeDecodeError as e:
            raise InvalidDocument(f"not valid UTF-8: byte {e.start}") from e
    return parse_document(data)
