"""Pacote de utilitários base para filtros.

Exporta a API pública usada pelos módulos de filtros:
- BaseFilter: classe abstrata base
- Exceções específicas: FilterError, MissingColumnsError, ValidationError,
  ConfigurationError
- Combinadores: AndFilter, OrFilter, NotFilter
- Validadores: validate_restriction, validate_boolean

Permite imports como:

    from sheetfilter.lib.filters.base import BaseFilter, ValidationError

"""

from .base import AndFilter, BaseFilter, NotFilter, OrFilter
from .exceptions import (
    ConfigurationError,
    FilterError,
    MissingColumnsError,
    ValidationError,
)
from .utils import (
    _ensure_bool_series,
    is_absent,
    is_blank,
    validate_boolean,
    validate_restriction,
)

__all__ = [
    "BaseFilter",
    "FilterError",
    "MissingColumnsError",
    "ValidationError",
    "ConfigurationError",
    "AndFilter",
    "OrFilter",
    "NotFilter",
    "_ensure_bool_series",
    "is_absent",
    "is_blank",
    "validate_boolean",
    "validate_restriction",
]
