"""Response shape defaulting for record-management API payloads."""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping


def standardize_response(response: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Guarantee list-valued `results`/`rejects` and mapping-valued result parts.

    Every mapping in `results` gains `fields` and `sublists` as empty dicts when
    they are missing or not mappings. The response is updated in place and returned.
    """

    if not isinstance(response.get("results"), list):
        response["results"] = []
    if not isinstance(response.get("rejects"), list):
        response["rejects"] = []
    for result in response["results"]:
        if not isinstance(result, MutableMapping):
            continue
        if not isinstance(result.get("fields"), Mapping):
            result["fields"] = {}
        if not isinstance(result.get("sublists"), Mapping):
            result["sublists"] = {}
    return response
