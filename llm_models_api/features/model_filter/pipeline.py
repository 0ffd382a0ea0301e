"""
Filtering and id rewriting of OpenRouter model records.

Records are plain dicts straight from the upstream JSON. Only ``id``,
``context_length`` and ``architecture.modality`` are looked at; everything
else passes through untouched. A record missing a field that an active stage
needs is dropped by that stage.
"""

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from llm_models_api.shared.constants import (
    FREE_VARIANT_MARKER,
    PROVIDER_SEPARATOR,
    VARIANT_SEPARATOR,
)
from .params import ModelFilterParams

ModelRecord = Dict[str, Any]
Predicate = Callable[[Any], bool]


def _model_id(record: Any) -> Optional[str]:
    if not isinstance(record, Mapping):
        return None
    model_id = record.get("id")
    return model_id if isinstance(model_id, str) else None


def split_model_id(model_id: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Splits "<provider>/<name>[:<variant>]" into (provider, name).

    The name is the second "/" segment with any variant removed. Both are
    None when the id has no "/".
    """
    parts = model_id.split(PROVIDER_SEPARATOR)
    if len(parts) < 2:
        return None, None
    return parts[0], parts[1].split(VARIANT_SEPARATOR)[0]


def _not_free(record: Any) -> bool:
    model_id = _model_id(record)
    return model_id is not None and FREE_VARIANT_MARKER not in model_id


def _provider_in(providers) -> Predicate:
    def predicate(record: Any) -> bool:
        model_id = _model_id(record)
        if model_id is None:
            return False
        provider, _ = split_model_id(model_id)
        return provider is not None and provider in providers
    return predicate


def _name_in(names) -> Predicate:
    def predicate(record: Any) -> bool:
        model_id = _model_id(record)
        if model_id is None:
            return False
        _, name = split_model_id(model_id)
        return name is not None and name in names
    return predicate


def _context_at_least(min_context: int) -> Predicate:
    def predicate(record: Any) -> bool:
        if not isinstance(record, Mapping):
            return False
        context_length = record.get("context_length")
        # bool is an int subclass but never a context length
        if isinstance(context_length, bool) or not isinstance(context_length, int):
            return False
        return context_length >= min_context
    return predicate


def _modality_contains(modality: str) -> Predicate:
    def predicate(record: Any) -> bool:
        if not isinstance(record, Mapping):
            return False
        architecture = record.get("architecture")
        if not isinstance(architecture, Mapping):
            return False
        value = architecture.get("modality")
        return isinstance(value, str) and modality in value
    return predicate


def _predicates(params: ModelFilterParams) -> List[Predicate]:
    predicates: List[Predicate] = []
    if params.ignore_free:
        predicates.append(_not_free)
    if params.providers is not None:
        predicates.append(_provider_in(params.providers))
    if params.models is not None:
        predicates.append(_name_in(params.models))
    if params.min_context is not None:
        predicates.append(_context_at_least(params.min_context))
    if params.modality is not None:
        predicates.append(_modality_contains(params.modality))
    return predicates


def strip_id_suffix(record: ModelRecord) -> ModelRecord:
    """Returns a shallow copy of ``record`` with anything after ":" removed from its id."""
    stripped = dict(record)
    model_id = _model_id(record)
    if model_id is not None and VARIANT_SEPARATOR in model_id:
        stripped["id"] = model_id.split(VARIANT_SEPARATOR)[0]
    return stripped


def filter_models(models: Iterable[ModelRecord], params: ModelFilterParams) -> List[ModelRecord]:
    """
    Applies the filters selected by ``params`` in order, then the id rewrite.

    The input records are never modified and the survivors keep their
    relative order.
    """
    result = list(models)
    for predicate in _predicates(params):
        result = [record for record in result if predicate(record)]

    if params.strip_suffix:
        result = [
            strip_id_suffix(record) if isinstance(record, Mapping) else record
            for record in result
        ]
    return result
