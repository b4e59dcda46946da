"""JSON wire models."""
from microplate.schemas.documents import (
    WellSchema,
    SimpleWellSchema,
    WellSetSchema,
    GroupSchema,
    PlateSchema,
    StackSchema,
    WellDocument,
    WellSetDocument,
    PlateDocument,
    StackDocument
)

__all__ = [
    "WellSchema", "SimpleWellSchema", "WellSetSchema", "GroupSchema", "PlateSchema", "StackSchema",
    "WellDocument", "WellSetDocument", "PlateDocument", "StackDocument"
]
