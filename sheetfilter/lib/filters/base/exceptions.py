"""Exceções específicas do pacote filters.base.

Mantém as definições de exceção separadas para evitar importações circulares
entre os módulos base, utils e os filtros concretos.
"""


class FilterError(Exception):
    """Erro genérico ao construir ou aplicar filtros."""


class MissingColumnsError(FilterError):
    """Lançado quando o DataFrame não possui colunas obrigatórias para um filtro."""


class ValidationError(FilterError, ValueError):
    """Valor fora da lista permitida (comparador, operador, booleano...)."""


class ConfigurationError(FilterError):
    """Configuração estruturalmente inválida (entrada malformada, spec desconhecida)."""
