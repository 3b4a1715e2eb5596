"""Repositories package."""
from mesoplan.repositories.program_repository import JsonProgramRepository

__all__ = [
    "JsonProgramRepository",
]
