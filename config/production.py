import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DOCUMENT_STORE = {
    "base_url": os.getenv("DOCUMENT_STORE_URL", "https://api.jsonbin.io/v3/b"),
    "bin_id": os.getenv("DOCUMENT_STORE_BIN_ID", ""),
    "master_key": os.getenv("DOCUMENT_STORE_MASTER_KEY", ""),
    "timeout": os.getenv("DOCUMENT_STORE_TIMEOUT", ""),
}

APPROVED_LINK_DOMAIN = os.getenv("APPROVED_LINK_DOMAIN", "drive.google.com")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
