from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (PersistenceError, 502),
)


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def current_role() -> Role:
    return Role(session.get("role"))


def handle_domain_errors(view):
    """Translate domain exceptions raised by services into JSON responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            status = next((code for err, code in _STATUS_BY_ERROR if isinstance(e, err)), 400)
            return json_error(str(e), status)
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return json_error("Erro interno do sistema", 500)

    return wrapper


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "employee_id" not in session:
            return json_error("Faça login para continuar", 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "employee_id" not in session:
            return json_error("Faça login para continuar", 401)
        if session.get("role") != Role.ADMIN.value:
            return json_error("Acesso restrito ao administrador", 403)
        return view(*args, **kwargs)

    return wrapper
