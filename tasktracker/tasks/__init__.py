"""
Tasks API package.

A single-resource CRUD API over caller-identified task records. Endpoints are
backed by an in-memory store so the behaviour is deterministic and the data
lives only as long as the process.
"""

from .router import router  # noqa: F401
from .store import TaskStore  # noqa: F401
