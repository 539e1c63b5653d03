from __future__ import annotations
import os

# Labels used in diff messages when the caller does not pass its own
REFERENCE_LABEL = "Teacher"
CANDIDATE_LABEL = "Student"

SOURCE_SUFFIX = ".java"

API_TITLE = "Class Structure Comparator"
API_VERSION = "0.3.0"

CORS_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
]

LOG_LEVEL = os.getenv("CLASS_COMPARE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
