"""
JSON Schema validation for raw ABI documents.

The bundled schema (abi.schema.json, Draft 7) describes the ABI JSON
format; validation runs before parsing when the caller asks for it.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Tuple

import jsonschema


SCHEMA_PATH = Path(__file__).parent / 'abi.schema.json'


@lru_cache(maxsize=1)
def load_schema() -> Dict[str, Any]:
    """Load the bundled ABI schema."""
    with open(SCHEMA_PATH, 'r') as f:
        return json.load(f)


def _json_pointer(path) -> str:
    return '/' + '/'.join(str(part) for part in path) if path else '/'


def _path_key(path) -> List[Tuple[int, Any]]:
    # Array indices sort numerically, ahead of object keys at the same depth
    return [(0, part) if isinstance(part, int) else (1, str(part)) for part in path]


def validate_abi(abi: Any) -> List[str]:
    """Validate decoded ABI JSON against the bundled schema.

    Args:
        abi: The decoded ABI document

    Returns:
        Error lines of the form `<json-pointer>: <message>`, sorted by
        location; empty when the document is valid
    """
    validator = jsonschema.Draft7Validator(load_schema())
    errors = sorted(validator.iter_errors(abi), key=lambda e: _path_key(e.absolute_path))
    return [f'{_json_pointer(e.absolute_path)}: {e.message}' for e in errors]

