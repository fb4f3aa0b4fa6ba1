from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_APPROVED_LINK_DOMAIN
from .document.connection import DocumentStoreConfig, JsonBinDocumentStore
from .document.reconciler import PortalRepository
from .document.repository import DocumentStore
from .employees.credentials import CredentialScheme, PlaintextCredentials
from .employees.service import AuthService, EmployeeService
from .payslips.service import PayslipService
from .stores.service import StoreService


@dataclass(frozen=True)
class Container:
    document_store: DocumentStore
    portal: PortalRepository

    auth_service: AuthService
    store_service: StoreService
    employee_service: EmployeeService
    payslip_service: PayslipService


def build_container(
    *,
    document_store_config: Optional[dict] = None,
    document_store: Optional[DocumentStore] = None,
    approved_link_domain: str = DEFAULT_APPROVED_LINK_DOMAIN,
    credentials: Optional[CredentialScheme] = None,
) -> Container:
    if document_store is None:
        if document_store_config is None:
            raise ValueError("document_store_config or document_store is required")
        timeout = document_store_config.get("timeout")
        config = DocumentStoreConfig(
            base_url=str(document_store_config["base_url"]),
            bin_id=str(document_store_config["bin_id"]),
            master_key=str(document_store_config["master_key"]),
            timeout=float(timeout) if timeout else None,
        )
        document_store = JsonBinDocumentStore(config)

    credentials = credentials or PlaintextCredentials()
    portal = PortalRepository(document_store)

    return Container(
        document_store=document_store,
        portal=portal,
        auth_service=AuthService(portal, credentials),
        store_service=StoreService(portal),
        employee_service=EmployeeService(portal, credentials),
        payslip_service=PayslipService(portal, approved_domain=approved_link_domain),
    )
