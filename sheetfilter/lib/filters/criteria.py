"""Critério individual de um filtro personalizado (``<customFilter>``)."""

from __future__ import annotations

from enum import Enum
from typing import Any

import pandas as pd

from ..constants import (
    ELEMENT_CUSTOM_FILTER,
    NOT_BLANK_PLACEHOLDER,
    WILDCARD,
    WIRE_EQUAL,
    WIRE_NOT_EQUAL,
    WIRE_OPERATORS,
)
from .base import ValidationError, is_absent, is_blank, validate_restriction
from .serialization import escape_attr, has_illegal_xml_chars


class Comparator(str, Enum):
    """Os onze comparadores suportados; o valor é o identificador camelCase."""

    LESS_THAN = "lessThan"
    LESS_THAN_OR_EQUAL = "lessThanOrEqual"
    EQUAL = "equal"
    NOT_EQUAL = "notEqual"
    NOT_BLANK = "notBlank"
    GREATER_THAN_OR_EQUAL = "greaterThanOrEqual"
    GREATER_THAN = "greaterThan"
    CONTAINS = "contains"
    NOT_CONTAINS = "notContains"
    BEGINS_WITH = "beginsWith"
    ENDS_WITH = "endsWith"

    @property
    def wire_name(self) -> str:
        """Nome gravado no atributo ``operator`` do arquivo."""
        if self in (Comparator.CONTAINS, Comparator.BEGINS_WITH, Comparator.ENDS_WITH):
            return WIRE_EQUAL
        if self in (Comparator.NOT_CONTAINS, Comparator.NOT_BLANK):
            return WIRE_NOT_EQUAL
        return self.value

    @property
    def leading_wildcard(self) -> str:
        if self in (Comparator.CONTAINS, Comparator.NOT_CONTAINS, Comparator.ENDS_WITH):
            return WILDCARD
        return ""

    @property
    def trailing_wildcard(self) -> str:
        if self in (Comparator.CONTAINS, Comparator.NOT_CONTAINS, Comparator.BEGINS_WITH):
            return WILDCARD
        return ""


COMPARATOR_NAMES = tuple(c.value for c in Comparator)


def _as_text(value: Any) -> str:
    """Texto exibido da célula; colunas inteiras com vazios chegam como float."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def resolve_comparator(value: Any) -> Comparator:
    """Converte ``value`` (enum ou nome camelCase) em :class:`Comparator`.

    Raises:
        ValidationError: se ``value`` estiver ausente ou fora da lista.
    """
    if isinstance(value, Comparator):
        return value
    if value is None:
        raise ValidationError("É necessário informar um comparador para o filtro")
    validate_restriction("CustomFilter.comparator", COMPARATOR_NAMES, value)
    return Comparator(value)


class FilterCriterion:
    """Um par comparador + operando aplicado ao valor de uma célula.

    O comparador é fixo após a construção; o operando pode ser reatribuído.

    Args:
        comparator: :class:`Comparator` ou seu nome (``"contains"``, ``"lessThan"``...).
        operand: texto ou número comparado ao valor; pode ser omitido.
        operator: nome de operador do arquivo (opcional). Quando informado deve
            estar na lista do formato e coincidir com ``comparator.wire_name``.

    Raises:
        ValidationError: comparador ausente/desconhecido, operando não escalar
            ou ``operator`` inconsistente.
    """

    __slots__ = ("_comparator", "_operand")

    def __init__(self, comparator: Any, operand: Any = None, *, operator: str | None = None) -> None:
        self._comparator = resolve_comparator(comparator)
        if operator is not None:
            validate_restriction("CustomFilter.operator", WIRE_OPERATORS, operator)
            if operator != self._comparator.wire_name:
                raise ValidationError(
                    f"Operador {operator!r} incompatível com o comparador "
                    f"{self._comparator.value!r} (esperado {self._comparator.wire_name!r})"
                )
        self.operand = operand

    @property
    def comparator(self) -> Comparator:
        return self._comparator

    @property
    def operand(self) -> Any:
        return self._operand

    @operand.setter
    def operand(self, value: Any) -> None:
        if value is not None and not pd.api.types.is_scalar(value):
            raise ValidationError(
                f"Operando do filtro deve ser escalar (texto ou número), recebido {value!r}"
            )
        if isinstance(value, str) and has_illegal_xml_chars(value):
            raise ValidationError(
                f"Operando contém caracteres não permitidos em XML: {value!r}"
            )
        self._operand = value

    @property
    def operator(self) -> str:
        return self._comparator.wire_name

    # --- Avaliação -----------------------------------------------------------
    def matches(self, value: Any) -> bool:
        """``True`` quando ``value`` satisfaz o critério."""
        c = self._comparator
        if c is Comparator.NOT_BLANK:
            return not is_blank(value)
        if c is Comparator.EQUAL:
            return self._equals(value)
        if c is Comparator.NOT_EQUAL:
            return not self._equals(value)
        if c is Comparator.CONTAINS:
            return self._text_test(value, str.__contains__)
        if c is Comparator.NOT_CONTAINS:
            return not self._text_test(value, str.__contains__)
        if c is Comparator.BEGINS_WITH:
            return self._text_test(value, str.startswith)
        if c is Comparator.ENDS_WITH:
            return self._text_test(value, str.endswith)
        if c in (
            Comparator.LESS_THAN,
            Comparator.LESS_THAN_OR_EQUAL,
            Comparator.GREATER_THAN_OR_EQUAL,
            Comparator.GREATER_THAN,
        ):
            return self._ordered(value)
        raise AssertionError(f"Comparador não tratado: {c!r}")  # pragma: no cover

    def _equals(self, value: Any) -> bool:
        if is_absent(self._operand) or is_absent(value):
            return is_absent(self._operand) and is_absent(value)
        try:
            return bool(value == self._operand)
        except (TypeError, ValueError):
            return False

    def _ordered(self, value: Any) -> bool:
        # Sem operando ou com tipos incomparáveis: nunca casa.
        operand = self._operand
        if is_absent(operand) or is_absent(value):
            return False
        c = self._comparator
        try:
            if c is Comparator.LESS_THAN:
                return bool(value < operand)
            if c is Comparator.LESS_THAN_OR_EQUAL:
                return bool(value <= operand)
            if c is Comparator.GREATER_THAN_OR_EQUAL:
                return bool(value >= operand)
            return bool(value > operand)
        except (TypeError, ValueError):
            return False

    def _text_test(self, value: Any, test) -> bool:
        # Comparação literal, sem regex, insensível a maiúsculas.
        if is_absent(self._operand):
            return False
        haystack = "" if is_absent(value) else _as_text(value).casefold()
        return bool(test(haystack, _as_text(self._operand).casefold()))

    # --- Serialização --------------------------------------------------------
    @property
    def val(self) -> str:
        """Texto do atributo ``val`` com curingas, antes do escape XML."""
        c = self._comparator
        if is_absent(self._operand):
            body = NOT_BLANK_PLACEHOLDER if c is Comparator.NOT_BLANK else ""
        else:
            body = str(self._operand)
        return f"{c.leading_wildcard}{body}{c.trailing_wildcard}"

    def write_xml(self) -> str:
        """Serializa como ``<customFilter operator="..." val="..." />``."""
        return (
            f'<{ELEMENT_CUSTOM_FILTER} operator="{self.operator}" '
            f'val="{escape_attr(self.val)}" />'
        )

    def to_dict(self) -> dict[str, Any]:
        return {"comparator": self._comparator.value, "operand": self._operand}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterCriterion):
            return NotImplemented
        return self._comparator is other._comparator and self._operand == other._operand

    __hash__ = None  # operando mutável

    def __repr__(self) -> str:
        return f"FilterCriterion({self._comparator.value!r}, {self._operand!r})"
