"""I/O services."""
from microplate.services.json_service import JsonService
from microplate.services.file_service import FileService

__all__ = ["JsonService", "FileService"]
