"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_APPROVED_LINK_DOMAIN = "drive.google.com"

MONTH_NAMES = (
    "Janeiro",
    "Fevereiro",
    "Março",
    "Abril",
    "Maio",
    "Junho",
    "Julho",
    "Agosto",
    "Setembro",
    "Outubro",
    "Novembro",
    "Dezembro",
)

UNKNOWN_STORE_NAME = "Desconhecida"
UNKNOWN_EMPLOYEE_NAME = "Desconhecido"
