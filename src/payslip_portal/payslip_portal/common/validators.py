from __future__ import annotations

import re

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"Preencha o campo {field_name}")
    return value.strip()


def normalize_store_code(code: str) -> str:
    """Lowercase a store code and drop every whitespace character."""
    return re.sub(r"\s+", "", code.lower())


def require_link_domain(link: str, domain: str) -> str:
    if domain not in link:
        raise ValidationError(f"Use um link válido de {domain}")
    return link
