"""JSON wire models for wells, well sets, plates and stacks."""
from typing import Any, List

from pydantic import BaseModel


class WellSchema(BaseModel):
    """Standalone well."""
    type: str  # e.g., "Integer"
    index: str  # e.g., "A1"
    size: int
    values: List[Any] = []


class SimpleWellSchema(BaseModel):
    """Well nested inside a well set or plate."""
    index: str
    values: List[Any] = []


class WellSetSchema(BaseModel):
    """Standalone well set."""
    type: str
    label: str
    size: int
    wells: List[SimpleWellSchema] = []


class GroupSchema(BaseModel):
    """Plate group: a label plus member indices only."""
    label: str
    size: int
    wells: List[str] = []


class PlateSchema(BaseModel):
    """Plate with its groups and wells."""
    type: str
    label: str
    descriptor: str
    rows: int
    columns: int
    size: int
    wellsets: List[GroupSchema] = []
    wells: List[SimpleWellSchema] = []


class StackSchema(BaseModel):
    """Stack of plates."""
    type: str
    label: str
    rows: int
    columns: int
    size: int
    plates: List[PlateSchema] = []


class WellDocument(BaseModel):
    wells: List[WellSchema] = []


class WellSetDocument(BaseModel):
    wellsets: List[WellSetSchema] = []


class PlateDocument(BaseModel):
    plates: List[PlateSchema] = []


class StackDocument(BaseModel):
    stacks: List[StackSchema] = []
