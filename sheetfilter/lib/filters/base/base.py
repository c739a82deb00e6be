from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

import pandas as pd

from .exceptions import MissingColumnsError
from .utils import _ensure_bool_series


# -----------------------------------------------------------------------------
# BaseFilter: protocolo / classe base para filtros de linha
# -----------------------------------------------------------------------------
class BaseFilter(ABC):
    """Filtro base que produz uma máscara booleana alinhada ao DataFrame.

    Regras:
      - Implemente :meth:`mask` para devolver uma ``pd.Series[bool]`` com o
        mesmo índice do DataFrame de entrada. ``True`` significa linha visível.
      - Use ``required_columns`` para declarar dependências de colunas.
      - Filtros podem ser combinados com ``&`` (AND), ``|`` (OR) e ``~`` (NOT).
      - Sobrescreva :meth:`write_xml` quando o filtro tem representação no
        arquivo (ex.: ``<customFilters>``). Só o AND entre colunas é
        persistido; OR e NOT existem apenas em memória.
    """

    #: Colunas obrigatórias para o filtro
    required_columns: Sequence[str] = ()

    @abstractmethod
    def mask(self, df: pd.DataFrame) -> pd.Series:
        """Calcula a máscara booleana deste filtro.

        Args:
            df: DataFrame da planilha (uma linha por linha de dados).
        Returns:
            Série booleana alinhada ao índice do ``df``.
        Raises:
            MissingColumnsError: se colunas obrigatórias estiverem ausentes.
        """
        raise NotImplementedError

    # --- API auxiliar --------------------------------------------------------
    def apply(self, df: pd.DataFrame) -> pd.DataFrame:
        """Aplica o filtro e retorna um *novo* DataFrame só com as linhas visíveis."""
        m = self.mask(df)
        _ensure_bool_series(m, df)
        return df.loc[m].copy()

    def hidden_index(self, df: pd.DataFrame) -> pd.Index:
        """Rótulos das linhas que este filtro oculta."""
        m = self.mask(df)
        _ensure_bool_series(m, df)
        return df.index[~m.to_numpy()]

    def write_xml(self) -> str:
        """Fragmento XML persistido pelo filtro; vazio quando não há forma no arquivo."""
        return ""

    def _check_columns(self, df: pd.DataFrame) -> None:
        missing = [c for c in self.required_columns if c not in df.columns]
        if missing:
            raise MissingColumnsError(f"Colunas ausentes no DataFrame: {missing}")

    # --- Composição booleana -------------------------------------------------
    def __and__(self, other: BaseFilter) -> AndFilter:
        return AndFilter(self, other)

    def __or__(self, other: BaseFilter) -> OrFilter:
        return OrFilter(self, other)

    def __invert__(self) -> NotFilter:
        return NotFilter(self)


# -----------------------------------------------------------------------------
# Combinadores entre colunas da planilha
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class AndFilter(BaseFilter):
    """Linha visível só se passar nos dois lados.

    É como o autofiltro combina colunas, então o XML é a concatenação dos
    fragmentos de ``left`` e ``right``.
    """

    left: BaseFilter
    right: BaseFilter

    def mask(self, df: pd.DataFrame) -> pd.Series:
        m = self.left.mask(df) & self.right.mask(df)
        _ensure_bool_series(m, df)
        return m

    def write_xml(self) -> str:
        return self.left.write_xml() + self.right.write_xml()


@dataclass(frozen=True)
class OrFilter(BaseFilter):
    """Linha visível se passar em qualquer lado.

    O arquivo não guarda OR entre colunas; :meth:`write_xml` fica vazio.
    """

    left: BaseFilter
    right: BaseFilter

    def mask(self, df: pd.DataFrame) -> pd.Series:
        m = self.left.mask(df) | self.right.mask(df)
        _ensure_bool_series(m, df)
        return m


@dataclass(frozen=True)
class NotFilter(BaseFilter):
    """Inverte visível/oculto de ``inner``; sem representação no arquivo."""

    inner: BaseFilter

    def mask(self, df: pd.DataFrame) -> pd.Series:
        m = ~self.inner.mask(df)
        _ensure_bool_series(m, df)
        return m
