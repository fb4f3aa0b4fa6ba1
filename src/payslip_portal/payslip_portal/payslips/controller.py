from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.http import admin_required, current_role, handle_domain_errors, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/payslips", methods=["GET"], endpoint="admin_payslips")
    @admin_required
    @handle_domain_errors
    def admin_payslips():
        store_id = request.args.get("store") or None
        if store_id == "all":
            store_id = None
        payslips = container.payslip_service.list_admin_view(store_id=store_id)
        return jsonify({"success": True, "payslips": payslips})

    @app.route("/admin/payslips", methods=["POST"], endpoint="add_payslip")
    @admin_required
    @handle_domain_errors
    def add_payslip():
        data = json_body()
        payslip = container.payslip_service.add_payslip(
            current_role=current_role(),
            store_id=str(data.get("storeId", "")),
            employee_id=str(data.get("employeeId", "")),
            month=str(data.get("month", "")),
            pdf_link=str(data.get("pdfLink", "")),
        )
        return (
            jsonify(
                {
                    "success": True,
                    "message": "Holerite adicionado com sucesso",
                    "payslip": {"id": payslip.payslip_id, "month": payslip.month},
                }
            ),
            201,
        )

    @app.route("/admin/payslips/<payslip_id>", methods=["DELETE"], endpoint="delete_payslip")
    @admin_required
    @handle_domain_errors
    def delete_payslip(payslip_id: str):
        container.payslip_service.delete_payslip(current_role=current_role(), payslip_id=payslip_id)
        return jsonify({"success": True, "message": "Holerite excluído com sucesso"})

    @app.route("/payslips", methods=["GET"], endpoint="my_payslips")
    @login_required
    @handle_domain_errors
    def my_payslips():
        employee_id = session["employee_id"]
        month = request.args.get("month") or None
        if month == "all":
            month = None
        return jsonify(
            {
                "success": True,
                "payslips": container.payslip_service.list_for_employee(employee_id=employee_id, month=month),
                "months": container.payslip_service.months_for_employee(employee_id=employee_id),
            }
        )
