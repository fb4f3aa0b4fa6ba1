from __future__ import annotations

import copy
from datetime import datetime
from typing import Any, Optional

import pytest

from src.payslip_portal.payslip_portal.core.exceptions import DocumentStoreError
from src.payslip_portal.payslip_portal.document.reconciler import PortalRepository


class InMemoryDocumentStore:
    """Fake remote store keeping the last PUT body as the next GET record."""

    def __init__(self, body: Optional[dict[str, Any]] = None):
        self.body = copy.deepcopy(body)
        self.puts: list[dict[str, Any]] = []
        self.fail_fetch = False
        self.fail_replace = False

    def fetch(self) -> dict[str, Any]:
        if self.fail_fetch:
            raise DocumentStoreError("connection refused")
        if self.body is None:
            raise DocumentStoreError("404 Not Found")
        return copy.deepcopy(self.body)

    def replace(self, document: dict[str, Any]) -> None:
        if self.fail_replace:
            raise DocumentStoreError("500 Internal Server Error")
        self.puts.append(copy.deepcopy(document))
        self.body = {"record": copy.deepcopy(document)}


def _seeded_record() -> dict[str, Any]:
    return {
        "stores": [
            {"id": "riomar", "name": "Riomar", "employeeCount": 0},
            {"id": "patteo", "name": "Patteo", "employeeCount": 0},
            {"id": "caruaru", "name": "Caruaru", "employeeCount": 7},
        ],
        "employees": [
            {"id": "admin", "name": "Administrador", "password": "admin123", "isAdmin": True, "storeId": ""},
            {"id": "1001", "name": "Ana", "password": "ana-pw", "isAdmin": False, "storeId": "riomar"},
            {"id": "1002", "name": "Bruno", "password": "bruno-pw", "isAdmin": False, "storeId": "riomar"},
            {"id": "2001", "name": "Carla", "password": "carla-pw", "isAdmin": False, "storeId": "patteo"},
        ],
        "payslips": [
            {
                "id": "1",
                "employeeId": "1001",
                "month": "Janeiro/2024",
                "pdfLink": "https://drive.google.com/file/d/a",
                "storeId": "riomar",
            },
            {
                "id": "2",
                "employeeId": "2001",
                "month": "Janeiro/2024",
                "pdfLink": "https://drive.google.com/file/d/b",
                "storeId": "patteo",
            },
            {
                "id": "3",
                "employeeId": "1001",
                "month": "Fevereiro/2024",
                "pdfLink": "https://drive.google.com/file/d/c",
                "storeId": "riomar",
            },
        ],
    }


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 10, 30, 0)


@pytest.fixture
def seeded_record() -> dict[str, Any]:
    return _seeded_record()


@pytest.fixture
def document_store_factory():
    return InMemoryDocumentStore


@pytest.fixture
def document_store(seeded_record) -> InMemoryDocumentStore:
    return InMemoryDocumentStore({"record": seeded_record})


@pytest.fixture
def portal(document_store) -> PortalRepository:
    repo = PortalRepository(document_store)
    repo.load()
    return repo
