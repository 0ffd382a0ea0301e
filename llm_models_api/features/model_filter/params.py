import re
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict

from llm_models_api.shared.constants import TRUE_VALUE, LIST_SEPARATOR

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_leading_int(value: Optional[str]) -> Optional[int]:
    """
    Reads the integer at the start of ``value``, ignoring anything after it.

    "8000" and "8000tokens" both give 8000; "abc" and None give None.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


def parse_name_set(value: Optional[str]) -> Optional[FrozenSet[str]]:
    if not value:
        return None
    return frozenset(value.split(LIST_SEPARATOR))


class ModelFilterParams(BaseModel):
    """
    Parsed filter and transform options for one /models request.

    ``None`` (or ``False``) for a field means the matching stage is skipped.
    """
    model_config = ConfigDict(frozen=True)

    ignore_free: bool = False
    providers: Optional[FrozenSet[str]] = None
    models: Optional[FrozenSet[str]] = None
    min_context: Optional[int] = None
    modality: Optional[str] = None
    strip_suffix: bool = False

    @classmethod
    def from_query(
        cls,
        ignore_free: Optional[str] = None,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        min_context: Optional[str] = None,
        modality: Optional[str] = None,
        strip_suffix: Optional[str] = None,
    ) -> "ModelFilterParams":
        """Builds params from raw query strings. Malformed values disable their stage."""
        min_context_value = parse_leading_int(min_context)
        return cls(
            ignore_free=ignore_free == TRUE_VALUE,
            providers=parse_name_set(provider),
            models=parse_name_set(model),
            min_context=min_context_value if min_context_value and min_context_value > 0 else None,
            modality=modality or None,
            strip_suffix=strip_suffix == TRUE_VALUE,
        )

    @property
    def is_active(self) -> bool:
        return (
            self.ignore_free
            or self.providers is not None
            or self.models is not None
            or self.min_context is not None
            or self.modality is not None
            or self.strip_suffix
        )
