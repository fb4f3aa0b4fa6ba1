from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import admin_required, current_role, handle_domain_errors, json_body
from ..container import Container
from .model import Store


def _store_view(store: Store) -> dict:
    return {"id": store.store_id, "name": store.name, "employeeCount": store.employee_count}


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/stores", methods=["GET"], endpoint="admin_stores")
    @admin_required
    @handle_domain_errors
    def admin_stores():
        stores = [_store_view(s) for s in container.store_service.list_stores()]
        return jsonify({"success": True, "stores": stores})

    @app.route("/admin/stores", methods=["POST"], endpoint="add_store")
    @admin_required
    @handle_domain_errors
    def add_store():
        data = json_body()
        store = container.store_service.add_store(
            current_role=current_role(),
            name=str(data.get("name", "")),
            code=str(data.get("code", "")),
        )
        return jsonify({"success": True, "message": "Loja adicionada com sucesso", "store": _store_view(store)}), 201

    @app.route("/admin/stores/<store_id>", methods=["DELETE"], endpoint="delete_store")
    @admin_required
    @handle_domain_errors
    def delete_store(store_id: str):
        container.store_service.delete_store(current_role=current_role(), store_id=store_id)
        return jsonify({"success": True, "message": "Loja excluída com sucesso"})

    @app.route("/admin/reload", methods=["POST"], endpoint="reload_document")
    @admin_required
    @handle_domain_errors
    def reload_document():
        snapshot = container.portal.load()
        return jsonify(
            {
                "success": True,
                "stores": len(snapshot.stores),
                "employees": len(snapshot.employees),
                "payslips": len(snapshot.payslips),
            }
        )
