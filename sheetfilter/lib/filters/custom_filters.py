"""Conjunto de critérios de um filtro personalizado (``<customFilters>``).

Uso típico a partir de configuração::

    fs = FilterSet.from_config(
        {
            "and": True,
            "custom_filter_items": [
                {"comparator": "between", "operand": [5, 10]},
            ],
        }
    )
    fs.row_matches(7)   # True -> linha visível
    fs.write_xml()      # '<customFilters and="1">...</customFilters>'

O atalho ``between`` vira dois critérios (``>= low`` e ``<= high``) no momento
da atribuição; para que funcione como intervalo o chamador deve ligar
``and``. Isso não é forçado aqui.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from ..constants import BETWEEN, ELEMENT_CUSTOM_FILTERS
from .base import ConfigurationError, is_absent, validate_boolean
from .criteria import Comparator, FilterCriterion
from .serialization import boolean_attribute, serialized_attributes

logger = logging.getLogger(__name__)

_RANGE_KINDS = {Comparator.GREATER_THAN_OR_EQUAL, Comparator.LESS_THAN_OR_EQUAL}


def _between_bounds(operand: Any) -> tuple[Any, Any]:
    if isinstance(operand, (str, bytes)) or not isinstance(operand, Sequence) or len(operand) != 2:
        raise ConfigurationError(
            f"Filtro 'between' exige operando com dois valores [min, max], recebido {operand!r}"
        )
    return operand[0], operand[1]


def criteria_from_entry(entry: Mapping[str, Any]) -> list[FilterCriterion]:
    """Constrói o(s) critério(s) de uma entrada de configuração.

    Aceita ``comparator`` (ou só ``operator``, no formato antigo) e ``operand``
    (ou ``val``). ``between`` devolve dois critérios, na ordem ``>=`` e ``<=``.

    Raises:
        ConfigurationError: entrada que não é dict ou ``between`` malformado.
        ValidationError: comparador/operador inválido.
    """
    if not isinstance(entry, Mapping):
        raise ConfigurationError(f"Entrada de filtro deve ser um dict, recebido {entry!r}")

    operator = entry.get("operator")
    comparator = entry.get("comparator", operator)
    operand = entry["operand"] if "operand" in entry else entry.get("val")

    if comparator == BETWEEN:
        low, high = _between_bounds(operand)
        return [
            FilterCriterion(Comparator.GREATER_THAN_OR_EQUAL, low),
            FilterCriterion(Comparator.LESS_THAN_OR_EQUAL, high),
        ]
    if "comparator" not in entry:
        operator = None
    return [FilterCriterion(comparator, operand, operator=operator)]


def _build_criteria(entries: Iterable[Mapping[str, Any]]) -> list[FilterCriterion]:
    if isinstance(entries, (Mapping, str, bytes)) or not isinstance(entries, Iterable):
        raise ConfigurationError(
            "Critérios devem ser uma lista de entradas {comparator, operand}"
        )
    new_items: list[FilterCriterion] = []
    for entry in entries:
        new_items.extend(criteria_from_entry(entry))
    return new_items


class FilterSet:
    """Critérios ordenados combinados por AND ou OR.

    ``row_matches`` devolve ``True`` quando a linha casa com o conjunto e deve
    ficar visível. Células ausentes (``None``/NaN) nunca casam.

    Args:
        options: mapeamento de opções (``and``/``combine_with_and`` e
            ``custom_filter_items``/``criteria``). Chaves com valor ``None`` são
            ignoradas; chaves desconhecidas geram um *warning* e são ignoradas.
    """

    #: Resultado de ``row_matches`` quando não há valor na célula
    absent_value_result: bool = False

    _XML_ATTRIBUTES = (boolean_attribute("and", lambda fs: fs.combine_with_and),)

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self._combine_with_and = False
        self._criteria: list[FilterCriterion] = []
        if options is not None:
            self.parse_options(options)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> FilterSet:
        return cls(config)

    def parse_options(self, options: Mapping[str, Any]) -> None:
        """Aplica as opções; tudo é validado antes de qualquer alteração."""
        if not isinstance(options, Mapping):
            raise ConfigurationError(
                f"Opções do filtro devem ser um dict, recebido {type(options).__name__}"
            )
        combine_with_and = self._combine_with_and
        new_items: list[FilterCriterion] = []
        for key, value in options.items():
            if value is None:
                continue
            if key in ("and", "combine_with_and"):
                combine_with_and = validate_boolean("CustomFilters.and", value)
            elif key in ("custom_filter_items", "criteria"):
                new_items.extend(_build_criteria(value))
            else:
                logger.warning("Opção desconhecida ignorada em FilterSet: %r", key)

        self._combine_with_and = combine_with_and
        self._extend_criteria(new_items)

    # --- Atributos -----------------------------------------------------------
    @property
    def combine_with_and(self) -> bool:
        return self._combine_with_and

    @combine_with_and.setter
    def combine_with_and(self, value: Any) -> None:
        self._combine_with_and = validate_boolean("CustomFilters.and", value)

    @property
    def logical_and(self) -> bool:
        return self._combine_with_and

    @property
    def criteria(self) -> tuple[FilterCriterion, ...]:
        return tuple(self._criteria)

    def assign_criteria(self, entries: Iterable[Mapping[str, Any]]) -> None:
        """Acrescenta critérios a partir de entradas de configuração.

        Operação atômica: se qualquer entrada for inválida nada é acrescentado.
        """
        self._extend_criteria(_build_criteria(entries))

    def _extend_criteria(self, new_items: list[FilterCriterion]) -> None:
        self._criteria.extend(new_items)
        kinds = {c.comparator for c in new_items}
        if not self._combine_with_and and _RANGE_KINDS <= kinds:
            logger.debug("FilterSet: intervalo com combinação OR; use and=True para 'between'")
        logger.debug(
            "FilterSet.assign_criteria: +%d critério(s), total=%d",
            len(new_items),
            len(self._criteria),
        )

    # --- Avaliação -----------------------------------------------------------
    def row_matches(self, value: Any) -> bool:
        if is_absent(value):
            return self.absent_value_result
        if self._combine_with_and:
            return all(c.matches(value) for c in self._criteria)
        return any(c.matches(value) for c in self._criteria)

    # --- Serialização --------------------------------------------------------
    def write_xml(self) -> str:
        parts = [f"<{ELEMENT_CUSTOM_FILTERS}{serialized_attributes(self, self._XML_ATTRIBUTES)}>"]
        parts.extend(c.write_xml() for c in self._criteria)
        parts.append(f"</{ELEMENT_CUSTOM_FILTERS}>")
        return "".join(parts)

    def to_config(self) -> dict[str, Any]:
        return {
            "and": self._combine_with_and,
            "custom_filter_items": [c.to_dict() for c in self._criteria],
        }

    # --- Conveniências -------------------------------------------------------
    def __len__(self) -> int:
        return len(self._criteria)

    def __iter__(self) -> Iterator[FilterCriterion]:
        return iter(tuple(self._criteria))

    def __repr__(self) -> str:
        return f"FilterSet(and={self._combine_with_and!r}, criteria={self._criteria!r})"
