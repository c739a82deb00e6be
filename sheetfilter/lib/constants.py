"""Constantes do formato de arquivo usadas pelos filtros personalizados."""

# Elementos XML
ELEMENT_CUSTOM_FILTERS = "customFilters"
ELEMENT_CUSTOM_FILTER = "customFilter"

# Nomes de operador aceitos pelo atributo ``operator`` de <customFilter>
WIRE_EQUAL = "equal"
WIRE_NOT_EQUAL = "notEqual"
WIRE_OPERATORS = (
    "equal",
    "greaterThan",
    "greaterThanOrEqual",
    "lessThan",
    "lessThanOrEqual",
    "notEqual",
)

# Atalho de configuração expandido em dois critérios
BETWEEN = "between"

WILDCARD = "*"
# Convenção do formato para "não vazio" quando não há operando
NOT_BLANK_PLACEHOLDER = " "

# Valores aceitos por validate_boolean
BOOLEAN_VALUES = (True, False, 1, 0, "true", "false", "1", "0")
