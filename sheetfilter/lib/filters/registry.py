"""Registry and builder for declarative row filters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .base import BaseFilter, ConfigurationError
from .builtins import CustomFiltersFilter

FILTER_REGISTRY: dict[str, type[BaseFilter]] = {
    "custom_filters": CustomFiltersFilter,
}


def register_filter(name: str, cls: type[BaseFilter]) -> None:
    if not name:
        raise ConfigurationError("Nome do filtro não pode ser vazio")
    if not isinstance(cls, type) or not issubclass(cls, BaseFilter):
        raise ConfigurationError("Classe deve herdar de BaseFilter")
    FILTER_REGISTRY[name] = cls


Spec = Mapping[str, Any]


def build_filter_from_spec(
    spec: Spec, *, registry: Mapping[str, type[BaseFilter]] | None = None
) -> BaseFilter:
    """Constrói um filtro a partir de ``{"type": ..., "args": {...}}``.

    Exemplo::

        build_filter_from_spec(
            {
                "type": "custom_filters",
                "args": {
                    "column": "price",
                    "filter_set": {"and": True, "custom_filter_items": [...]},
                },
            }
        )
    """
    if not isinstance(spec, Mapping):
        raise ConfigurationError("Spec inválida: deve ser um dict")
    reg = dict(FILTER_REGISTRY if registry is None else registry)
    t = spec.get("type")
    if not isinstance(t, str):
        raise ConfigurationError("Spec inválida: campo 'type' ausente/não-string")
    cls = reg.get(t.strip().lower())
    if cls is None:
        raise ConfigurationError(f"Filtro não suportado: {t}")
    args = spec.get("args", {})
    if not isinstance(args, Mapping):
        raise ConfigurationError("Spec inválida: 'args' deve ser um dict")
    return cls(**dict(args))  # type: ignore[arg-type]
