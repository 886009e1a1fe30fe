import os


class Config:
    LOG_LEVEL = os.environ.get("MEMBERDOCS_LOG_LEVEL", "WARNING").upper()
    DOCS_PATH = os.environ.get("MEMBERDOCS_DOCS_PATH", "docs_chunks")
