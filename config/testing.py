import os

SECRET_KEY = "test-secret"

DOCUMENT_STORE = {
    "base_url": os.getenv("DOCUMENT_STORE_URL", "http://localhost:8900/v3/b"),
    "bin_id": os.getenv("DOCUMENT_STORE_BIN_ID", "test-bin"),
    "master_key": os.getenv("DOCUMENT_STORE_MASTER_KEY", "test-key"),
    "timeout": os.getenv("DOCUMENT_STORE_TIMEOUT", "5"),
}

APPROVED_LINK_DOMAIN = "drive.google.com"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
