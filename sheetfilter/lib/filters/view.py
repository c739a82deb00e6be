from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import List, Sequence, Union

import pandas as pd

from .base import BaseFilter, _ensure_bool_series

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# SheetView: visão lazy sobre o DataFrame da planilha
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SheetView:
    """*Wrapper* imutável e *lazy* para aplicar filtros de linha a uma planilha.

    Args:
        base_df: DataFrame com uma linha por linha de dados da planilha.
        filters: filtros a aplicar (AND entre eles, como colunas de um
                 autofiltro). Para OR/NOT, use a composição (``|``, ``~``).

    Notas:
      - ``filter(...)`` devolve **uma nova** ``SheetView``.
      - ``compute()`` materializa e retorna um *novo* DataFrame com as linhas
        visíveis; ``hidden_index()`` devolve os rótulos das linhas ocultas.
    """

    base_df: pd.DataFrame
    filters: Sequence[BaseFilter] = field(default_factory=tuple)

    def filter(self, flt: Union[BaseFilter, Sequence[BaseFilter]]) -> "SheetView":
        """Retorna nova view com filtros adicionais (lazy)."""
        new_filters: List[BaseFilter] = list(self.filters)
        if isinstance(flt, Iterable) and not isinstance(flt, BaseFilter):
            new_filters.extend(flt)  # type: ignore[arg-type]
        else:
            new_filters.append(flt)  # type: ignore[arg-type]
        return SheetView(self.base_df, tuple(new_filters))

    def visible_mask(self) -> pd.Series:
        mask = pd.Series(True, index=self.base_df.index)
        for f in self.filters:
            fm = f.mask(self.base_df)
            _ensure_bool_series(fm, self.base_df)
            mask &= fm
        return mask

    def compute(self) -> pd.DataFrame:
        """Materializa a view aplicando todos os filtros.

        Returns:
            Um novo DataFrame com as linhas aprovadas por **todos** os filtros.
        """
        if not self.filters:
            return self.base_df.copy()
        mask = self.visible_mask()
        logger.debug(
            "SheetView.compute: filtros=%d, visíveis=%d/%d",
            len(self.filters),
            int(mask.sum()),
            len(mask),
        )
        return self.base_df.loc[mask].copy()

    def hidden_index(self) -> pd.Index:
        """Rótulos das linhas que o autofiltro deve ocultar."""
        return self.base_df.index[~self.visible_mask().to_numpy()]

    # Conveniências
    def head(self, n: int = 5) -> pd.DataFrame:
        return self.compute().head(n)

    def to_xml(self) -> str:
        """Concatena os fragmentos XML dos filtros da view (na ordem).

        Filtros sem forma no arquivo (OR, NOT) ficam de fora, com log em debug.
        """
        parts = []
        for f in self.filters:
            xml = f.write_xml()
            if not xml:
                logger.debug("SheetView.to_xml: filtro sem forma no arquivo ignorado: %r", f)
            parts.append(xml)
        return "".join(parts)
