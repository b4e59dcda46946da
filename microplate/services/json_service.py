"""JSON import and export for wells, well sets, plates and stacks."""
import logging
from pathlib import Path
from typing import List, Union

from microplate.config import settings
from microplate.exceptions import NumericTypeError
from microplate.models import NumericType, Plate, Stack, Well, WellIndex, WellList, WellSet
from microplate.schemas import (
    GroupSchema,
    PlateDocument,
    PlateSchema,
    SimpleWellSchema,
    StackDocument,
    StackSchema,
    WellDocument,
    WellSchema,
    WellSetDocument,
    WellSetSchema
)

logger = logging.getLogger(__name__)


def _numeric_type(name: str) -> NumericType:
    try:
        return NumericType(name)
    except ValueError:
        raise NumericTypeError(f"Unknown numeric type: {name}")


def _listify(source, single) -> list:
    if isinstance(source, single):
        return [source]
    return list(source)


class JsonService:
    """Service for converting model objects to and from JSON documents."""

    def __init__(self, indent: int = None):
        self.indent = settings.json_indent if indent is None else indent

    # Model -> schema

    def _simple_well(self, well: Well) -> SimpleWellSchema:
        return SimpleWellSchema(index=well.index_string, values=list(well.data))

    def _well(self, well: Well) -> WellSchema:
        return WellSchema(
            type=well.type_string,
            index=well.index_string,
            size=len(well),
            values=list(well.data)
        )

    def _well_set(self, well_set: WellSet) -> WellSetSchema:
        return WellSetSchema(
            type=well_set.numeric_type.value,
            label=well_set.label,
            size=len(well_set),
            wells=[self._simple_well(well) for well in well_set]
        )

    def _plate(self, plate: Plate) -> PlateSchema:
        groups = [
            GroupSchema(label=group.label, size=len(group), wells=[str(index) for index in group])
            for group in plate.group_lists()
        ]
        return PlateSchema(
            type=plate.type_string,
            label=plate.label,
            descriptor=plate.descriptor,
            rows=plate.rows,
            columns=plate.columns,
            size=len(plate),
            wellsets=groups,
            wells=[self._simple_well(well) for well in plate]
        )

    def _stack(self, stack: Stack) -> StackSchema:
        return StackSchema(
            type=stack.type_string,
            label=stack.label,
            rows=stack.rows,
            columns=stack.columns,
            size=len(stack),
            plates=[self._plate(plate) for plate in stack]
        )

    # Schema -> model

    def _to_well(self, schema: Union[WellSchema, SimpleWellSchema], numeric_type: NumericType) -> Well:
        return Well(schema.index, data=schema.values, numeric_type=numeric_type)

    def _to_well_set(self, schema: WellSetSchema) -> WellSet:
        numeric_type = _numeric_type(schema.type)
        wells = [self._to_well(well, numeric_type) for well in schema.wells]
        return WellSet(wells, label=schema.label, numeric_type=numeric_type)

    def _to_plate(self, schema: PlateSchema) -> Plate:
        numeric_type = _numeric_type(schema.type)
        plate = Plate(schema.rows, schema.columns, label=schema.label, numeric_type=numeric_type)
        plate.add_wells([self._to_well(well, numeric_type) for well in schema.wells])
        plate.add_groups([
            WellList([WellIndex.parse(index) for index in group.wells], label=group.label)
            for group in schema.wellsets
        ])
        return plate

    def _to_stack(self, schema: StackSchema) -> Stack:
        numeric_type = _numeric_type(schema.type)
        plates = [self._to_plate(plate) for plate in schema.plates]
        return Stack(schema.rows, schema.columns, label=schema.label, plates=plates, numeric_type=numeric_type)

    # Writers

    def wells_to_json(self, wells) -> str:
        """Serialise one well or many as {"wells": [...]}."""
        document = WellDocument(wells=[self._well(well) for well in _listify(wells, Well)])
        return document.model_dump_json(indent=self.indent)

    def sets_to_json(self, well_sets) -> str:
        """Serialise one well set or many as {"wellsets": [...]}."""
        document = WellSetDocument(wellsets=[self._well_set(s) for s in _listify(well_sets, WellSet)])
        return document.model_dump_json(indent=self.indent)

    def plates_to_json(self, plates) -> str:
        """Serialise one plate or many as {"plates": [...]}."""
        document = PlateDocument(plates=[self._plate(plate) for plate in _listify(plates, Plate)])
        return document.model_dump_json(indent=self.indent)

    def stacks_to_json(self, stacks) -> str:
        """Serialise one stack or many as {"stacks": [...]}."""
        document = StackDocument(stacks=[self._stack(stack) for stack in _listify(stacks, Stack)])
        return document.model_dump_json(indent=self.indent)

    # Readers

    def read_wells(self, text: str) -> List[Well]:
        document = WellDocument.model_validate_json(text)
        return [self._to_well(well, _numeric_type(well.type)) for well in document.wells]

    def read_sets(self, text: str) -> List[WellSet]:
        document = WellSetDocument.model_validate_json(text)
        return [self._to_well_set(well_set) for well_set in document.wellsets]

    def read_plates(self, text: str) -> List[Plate]:
        document = PlateDocument.model_validate_json(text)
        return [self._to_plate(plate) for plate in document.plates]

    def read_stacks(self, text: str) -> List[Stack]:
        document = StackDocument.model_validate_json(text)
        return [self._to_stack(stack) for stack in document.stacks]

    # Files

    def write(self, path, document: str) -> None:
        """Write a serialised document to disk."""
        Path(path).write_text(document, encoding="utf-8")
        logger.info("Wrote JSON document to %s", path)

    def load(self, path, kind: str) -> list:
        """
        Read a JSON document from disk.

        Args:
            path: File to read
            kind: One of "wells", "wellsets", "plates" or "stacks"

        Returns:
            The model objects held by the document
        """
        readers = {
            "wells": self.read_wells,
            "wellsets": self.read_sets,
            "plates": self.read_plates,
            "stacks": self.read_stacks,
        }
        if kind not in readers:
            raise ValueError(f"Unknown document kind: {kind}")

        items = readers[kind](Path(path).read_text(encoding="utf-8"))
        logger.info("Read %d %s from %s", len(items), kind, path)
        return items
