"""Project Store"""

from .store import INDEX_FILE, ProjectStore, generate_project_id, get_project_store

__all__ = [
    "INDEX_FILE",
    "ProjectStore",
    "generate_project_id",
    "get_project_store",
]
