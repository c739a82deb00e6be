from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pandas as pd

from ...constants import BOOLEAN_VALUES
from .exceptions import FilterError, ValidationError


def _ensure_bool_series(mask: pd.Series, df: pd.DataFrame) -> None:
    """Garante que a série ``mask`` seja booleana e alinhada ao ``df``.

    Lança ``FilterError`` com mensagens claras caso algo esteja desalinhado ou
    com tipo inadequado.
    """
    if not isinstance(mask, pd.Series):
        raise FilterError("Máscara deve ser uma pandas.Series")
    if mask.dtype != bool:
        # Não aceita "truthy" arbitrário; força booleana.
        try:
            mask = mask.astype(bool)
        except (TypeError, ValueError) as exc:  # pragma: no cover
            raise FilterError("Máscara não booleana e conversão falhou") from exc
    if not mask.index.equals(df.index):
        raise FilterError("Índice da máscara não corresponde ao índice do DataFrame")


def is_absent(value: Any) -> bool:
    """``True`` para ``None`` e para escalares ausentes do pandas (NaN, NaT, NA)."""
    if value is None:
        return True
    if not pd.api.types.is_scalar(value):
        return False
    return bool(pd.isna(value))


def is_blank(value: Any) -> bool:
    """Ausente ou string vazia."""
    return is_absent(value) or (isinstance(value, str) and value == "")


def validate_restriction(name: str, allowed: Iterable[Any], value: Any) -> Any:
    """Valida ``value`` contra uma lista fechada de valores permitidos.

    Args:
        name: nome do campo (usado na mensagem de erro), ex.: ``"CustomFilter.operator"``.
        allowed: valores aceitos.
        value: valor a validar.
    Returns:
        O próprio ``value``.
    Raises:
        ValidationError: se ``value`` não estiver em ``allowed``.
    """
    allowed = tuple(allowed)
    if value not in allowed:
        raise ValidationError(
            f"Valor inválido para {name}: {value!r}. Permitidos: {list(allowed)}"
        )
    return value


def validate_boolean(name: str, value: Any) -> bool:
    """Aceita ``True/False``, ``1/0``, ``"true"/"false"`` e ``"1"/"0"``."""
    if isinstance(value, str):
        key = value.strip().lower()
        if key in ("true", "1"):
            return True
        if key in ("false", "0"):
            return False
    elif isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ValidationError(
        f"Valor inválido para {name}: {value!r}. Permitidos: {list(BOOLEAN_VALUES)}"
    )
