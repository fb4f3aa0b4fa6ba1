from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.http import (
    admin_required,
    current_role,
    handle_domain_errors,
    json_body,
    login_required,
)
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    @handle_domain_errors
    def login():
        data = json_body()
        s_user = container.auth_service.authenticate(
            str(data.get("username", "")),
            str(data.get("password", "")),
        )

        session.clear()
        session["employee_id"] = s_user.employee_id
        session["name"] = s_user.name
        session["role"] = s_user.role.value
        session["store_id"] = s_user.store_id

        return jsonify(
            {
                "success": True,
                "message": f"Bem-vindo, {s_user.name}!",
                "role": s_user.role.value,
            }
        )

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True, "message": "Sessão encerrada"})

    @app.route("/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        store_id = session.get("store_id") or ""
        return jsonify(
            {
                "success": True,
                "id": session["employee_id"],
                "name": session.get("name"),
                "role": session.get("role"),
                "storeId": store_id,
                "storeName": container.portal.snapshot.store_name(store_id) if store_id else "",
            }
        )

    @app.route("/password", methods=["POST"], endpoint="change_password")
    @login_required
    @handle_domain_errors
    def change_password():
        data = json_body()
        container.auth_service.change_password(
            employee_id=session["employee_id"],
            current_password=str(data.get("currentPassword", "")),
            new_password=str(data.get("newPassword", "")),
            confirm_password=str(data.get("confirmPassword", "")),
        )
        return jsonify({"success": True, "message": "Senha alterada com sucesso"})

    @app.route("/admin/employees", methods=["GET"], endpoint="admin_employees")
    @admin_required
    @handle_domain_errors
    def admin_employees():
        store_id = request.args.get("store") or None
        if store_id == "all":
            store_id = None
        return jsonify({"success": True, "employees": container.employee_service.list_admin_view(store_id=store_id)})

    @app.route("/admin/employees", methods=["POST"], endpoint="add_employee")
    @admin_required
    @handle_domain_errors
    def add_employee():
        data = json_body()
        employee = container.employee_service.add_employee(
            current_role=current_role(),
            name=str(data.get("name", "")),
            employee_id=str(data.get("id", "")),
            store_id=str(data.get("storeId", "")),
            password=str(data.get("password", "")),
        )
        return (
            jsonify(
                {
                    "success": True,
                    "message": "Funcionário adicionado com sucesso",
                    "employee": {"id": employee.employee_id, "name": employee.name, "storeId": employee.store_id},
                }
            ),
            201,
        )

    @app.route("/admin/employees/<employee_id>", methods=["PUT"], endpoint="edit_employee")
    @admin_required
    @handle_domain_errors
    def edit_employee(employee_id: str):
        data = json_body()
        employee = container.employee_service.edit_employee(
            current_role=current_role(),
            employee_id=employee_id,
            name=str(data.get("name", "")),
            store_id=str(data.get("storeId", "")),
            password=str(data.get("password", "")),
        )
        return jsonify(
            {
                "success": True,
                "message": "Funcionário atualizado com sucesso",
                "employee": {"id": employee.employee_id, "name": employee.name, "storeId": employee.store_id},
            }
        )

    @app.route("/admin/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    @handle_domain_errors
    def delete_employee(employee_id: str):
        container.employee_service.delete_employee(current_role=current_role(), employee_id=employee_id)
        return jsonify({"success": True, "message": "Funcionário excluído com sucesso"})
