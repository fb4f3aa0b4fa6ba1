"""Payslip Portal package.

Feature modules (stores, employees, payslips) sit on top of a single shared
remote JSON document, mediated by the reconciler in ``document``. Controllers
are a thin Flask JSON layer over the services.
"""
