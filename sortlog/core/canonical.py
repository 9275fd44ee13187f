"""
Canonical serialization for deterministic hashing.

All step log and run serialization goes through these functions so the same
run always encodes to identical bytes, and therefore to an identical digest.
"""

import hashlib
import json
from typing import Any, Dict, Iterable, List

from .steps import Step, step_from_list, step_to_list


def canonicalize(obj: Any) -> Any:
    """
    Convert arbitrary nested dict/list to canonical form.

    Rules:
    - dict keys sorted alphabetically
    - tuples converted to lists
    - recursive normalization
    """
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Deterministic JSON bytes for hashing.

    Guarantees:
    - sort_keys=True (secondary safety)
    - separators remove whitespace
    - ensure_ascii=False keeps UTF-8 stable
    - canonical preprocessing via canonicalize()

    Raises:
        TypeError: If obj holds values JSON cannot represent
    """
    canon = canonicalize(obj)
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    """
    Deterministic JSON string (for display or transmission).

    Same guarantees as canonical_json_bytes but returns string.
    """
    return canonical_json_bytes(obj).decode("utf-8")


def steps_to_records(steps: Iterable[Step]) -> List[List[Dict[str, Any]]]:
    """Encode a step log as a list of command-dict lists."""
    return [step_to_list(step) for step in steps]


def steps_from_records(records: Iterable[Iterable[Dict[str, Any]]]) -> tuple:
    """
    Decode a step log produced by steps_to_records().

    Raises:
        UnknownCommandError: If a record carries an unknown kind
        InvalidCommandError: If a record has malformed operands
        InvalidStepError: If a step record is empty
    """
    return tuple(step_from_list(items) for items in records)


def step_log_digest(steps: Iterable[Step]) -> str:
    """
    SHA-256 of the canonical step log encoding.

    Returns:
        Hex digest
    """
    return hashlib.sha256(canonical_json_bytes(steps_to_records(steps))).hexdigest()
