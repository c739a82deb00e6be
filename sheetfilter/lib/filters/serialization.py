"""Helpers de serialização XML (atributos opcionais e escape)."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
import re
from typing import Any
from xml.sax.saxutils import escape

# Quebras de linha e tabulação viram referências para sobreviver à
# normalização de atributos do leitor XML.
_ATTR_ENTITIES = {'"': "&quot;", "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}

# Caracteres fora do conjunto Char do XML 1.0
_ILLEGAL_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def has_illegal_xml_chars(text: str) -> bool:
    return _ILLEGAL_XML_CHARS.search(text) is not None


def escape_attr(value: Any) -> str:
    """Converte ``value`` em texto seguro para um atributo entre aspas duplas."""
    return escape(str(value), _ATTR_ENTITIES)


def _bool_to_xml(value: Any) -> str:
    return "1" if value else "0"


@dataclass(frozen=True)
class SerializedAttribute:
    """Atributo XML emitido apenas quando ``predicate`` é verdadeiro.

    Attributes:
        name: nome do atributo XML (ex.: ``"and"``).
        getter: lê o valor no objeto serializado.
        predicate: decide se o atributo é emitido; recebe o valor lido.
        render: converte o valor em texto (antes do escape).
    """

    name: str
    getter: Callable[[Any], Any]
    predicate: Callable[[Any], bool] = bool
    render: Callable[[Any], str] = str

    def to_xml(self, obj: Any) -> str:
        value = self.getter(obj)
        if not self.predicate(value):
            return ""
        return f'{self.name}="{escape_attr(self.render(value))}"'


def boolean_attribute(name: str, getter: Callable[[Any], Any]) -> SerializedAttribute:
    """Atributo booleano presente (``="1"``) só quando verdadeiro; nunca ``="0"``."""
    return SerializedAttribute(name, getter, predicate=bool, render=_bool_to_xml)


def serialized_attributes(obj: Any, attributes: Sequence[SerializedAttribute]) -> str:
    """Renderiza os atributos presentes, separados por espaço e com espaço inicial.

    Devolve ``""`` quando nenhum atributo é emitido, para que a tag fique sem
    espaço sobrando (``<customFilters>``).
    """
    parts = [a.to_xml(obj) for a in attributes]
    rendered = " ".join(p for p in parts if p)
    return f" {rendered}" if rendered else ""
