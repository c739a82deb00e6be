from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pandas as pd

from .base import BaseFilter
from .custom_filters import FilterSet


# -----------------------------------------------------------------------------
# Filtros concretos sobre colunas da planilha
# -----------------------------------------------------------------------------
class CustomFiltersFilter(BaseFilter):
    """Aplica um :class:`FilterSet` aos valores de uma coluna do DataFrame.

    Cada célula de ``column`` é testada com ``filter_set.row_matches``; a linha
    fica visível (``True``) quando casa. Valores ausentes (``None``/NaN) seguem a
    política do conjunto e ficam ocultos.

    Args:
        column: nome da coluna testada.
        filter_set: :class:`FilterSet` pronto ou mapeamento de opções
            (``{"and": ..., "custom_filter_items": [...]}``).

    Raises:
        MissingColumnsError: em :meth:`mask`, se ``column`` não existir.
    """

    def __init__(self, column: str, filter_set: FilterSet | Mapping[str, Any]) -> None:
        self.column = column
        self.required_columns = (column,)
        if not isinstance(filter_set, FilterSet):
            filter_set = FilterSet.from_config(filter_set)
        self.filter_set = filter_set

    def mask(self, df: pd.DataFrame) -> pd.Series:
        self._check_columns(df)
        serie = df[self.column]
        m = serie.map(self.filter_set.row_matches)
        return m.astype(bool)

    def write_xml(self) -> str:
        return self.filter_set.write_xml()

    def __repr__(self) -> str:
        return f"CustomFiltersFilter({self.column!r}, {self.filter_set!r})"
