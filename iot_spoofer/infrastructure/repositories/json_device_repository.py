"""
JSON File Device Repository - Infrastructure Layer

This module implements the DeviceRepository interface on top of a single
JSON file holding the ordered array of devices.

Every mutation re-reads the whole file, applies the change in memory and
writes it back through a temp file that replaces the real path, so a crash
mid-write never leaves a truncated store behind. There is no locking
across processes: two writers racing on read-modify-write lose updates.
Inside one event loop a mutation never awaits between read and write.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import uuid4

from iot_spoofer.domain.entities.device import DEFAULT_MANUFACTURER, Device
from iot_spoofer.domain.entities.entity import BaseEntity
from iot_spoofer.domain.entities.errors import (
    DeviceStoreError,
    DeviceValidationError,
    UnknownEntityTypeError,
)
from iot_spoofer.domain.repositories.device_repository import IDeviceRepository
from iot_spoofer.domain.services.entity_factory import create_entity
from iot_spoofer.shared import get_logger

logger = get_logger(__name__)


def generate_id() -> str:
    return uuid4().hex



def _malformed_entity_reason(definition: Any) -> Optional[str]:
    if not isinstance(definition, dict):
        return "entity is not a JSON object"
    states = definition.get("states")
    if states is not None and not isinstance(states, dict):
        return "entity states is not a JSON object"
    return None


class JsonDeviceRepository(IDeviceRepository):
    """JSON file implementation of the DeviceRepository."""

    def __init__(self, file_path: str):
        """
        Initialize the JSON device repository.

        Args:
            file_path: Location of the devices file
        """
        self.file_path = Path(file_path)

    @property
    def tmp_path(self) -> Path:
        return self.file_path.with_name(self.file_path.name + ".tmp")

    def _ensure_file(self) -> None:
        """Create the data directory and an empty store when missing."""
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            if not self.file_path.exists():
                self.file_path.write_text("[]", encoding="utf-8")
                logger.info("device_store.created", path=str(self.file_path))
        except OSError as e:
            raise DeviceStoreError(
                f"Unable to initialize device store at {self.file_path}: {e}"
            ) from e

    def _read_documents(self) -> List[Dict[str, Any]]:
        self._ensure_file()
        try:
            raw = self.file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise DeviceStoreError(
                f"Unable to read device store at {self.file_path}: {e}"
            ) from e

        try:
            documents = json.loads(raw) if raw.strip() else []
        except json.JSONDecodeError as e:
            raise DeviceStoreError(
                f"Device store at {self.file_path} is not valid JSON: {e}"
            ) from e

        if not isinstance(documents, list):
            raise DeviceStoreError(
                f"Device store at {self.file_path} must contain a JSON array"
            )
        return documents

    def _write_documents(self, documents: List[Dict[str, Any]]) -> None:
        self._ensure_file()
        tmp_path = self.tmp_path
        try:
            with open(tmp_path, "w", encoding="utf-8") as handle:
                json.dump(documents, handle, indent=2)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            raise DeviceStoreError(
                f"Unable to write device store at {self.file_path}: {e}"
            ) from e

    def _to_document(self, device: Device) -> Dict[str, Any]:
        """Convert a Device entity to its stored JSON shape."""
        return {
            "id": device.id,
            "name": device.name,
            "manufacturer": device.manufacturer,
            "entities": [entity.to_dict() for entity in device.entities],
        }

    def _to_entity(self, document: Dict[str, Any]) -> Device:
        """Convert a stored JSON object to a Device entity."""
        if not isinstance(document, dict):
            raise DeviceStoreError(
                f"Device store at {self.file_path} holds a device that is not "
                "a JSON object"
            )

        device_id = str(document.get("id") or "")
        entities: List[BaseEntity] = []
        for definition in document.get("entities") or []:
            malformed = _malformed_entity_reason(definition)
            if malformed is not None:
                logger.warning(
                    "device_store.entity_skipped",
                    device_id=device_id,
                    error=malformed,
                )
                continue
            try:
                entities.append(create_entity(definition))
            except UnknownEntityTypeError as e:
                logger.warning(
                    "device_store.entity_skipped",
                    device_id=device_id,
                    entity_id=definition.get("id"),
                    error=str(e),
                )

        return Device(
            id=device_id,
            name=str(document.get("name") or ""),
            manufacturer=document.get("manufacturer") or DEFAULT_MANUFACTURER,
            entities=entities,
        )

    def _load(self) -> List[Device]:
        return [self._to_entity(document) for document in self._read_documents()]

    def _save(self, devices: List[Device]) -> None:
        self._write_documents([self._to_document(device) for device in devices])

    @staticmethod
    def _assign_entity_ids(entities: List[BaseEntity]) -> List[BaseEntity]:
        for entity in entities:
            if not entity.id:
                entity.id = generate_id()

        # Entity ids name the discovery config and command topics
        seen = set()
        for entity in entities:
            if entity.id in seen:
                raise DeviceValidationError(
                    "entity ids must be unique",
                    {"field": "entities", "entity_id": entity.id},
                )
            seen.add(entity.id)
        return entities

    @staticmethod
    def _validate_name(name: Optional[str]) -> str:
        if name is None or not name.strip():
            raise DeviceValidationError("name is required", {"field": "name"})
        return name.strip()

    async def list_devices(self) -> List[Device]:
        return self._load()

    async def find_by_id(self, device_id: str) -> Optional[Device]:
        for device in self._load():
            if device.id == device_id:
                return device
        return None

    async def create(self, device: Device) -> Device:
        device.name = self._validate_name(device.name)
        if not device.manufacturer:
            device.manufacturer = DEFAULT_MANUFACTURER
        device.id = generate_id()
        self._assign_entity_ids(device.entities)

        devices = self._load()
        devices.append(device)
        self._save(devices)

        logger.info(
            "device_store.device_created",
            device_id=device.id,
            entity_count=len(device.entities),
        )
        return device

    async def update(
        self,
        device_id: str,
        name: Optional[str] = None,
        entities: Optional[List[BaseEntity]] = None,
    ) -> Optional[Device]:
        if name is not None:
            name = self._validate_name(name)

        devices = self._load()
        device = next((d for d in devices if d.id == device_id), None)
        if device is None:
            return None

        if name is not None:
            device.name = name
        if entities is not None:
            device.entities = self._assign_entity_ids(list(entities))

        self._save(devices)

        logger.info(
            "device_store.device_updated",
            device_id=device_id,
            entity_count=len(device.entities),
        )
        return device

    async def delete(self, device_id: str) -> bool:
        devices = self._load()
        remaining = [device for device in devices if device.id != device_id]
        self._save(remaining)

        deleted = len(remaining) != len(devices)
        logger.info("device_store.device_deleted", device_id=device_id, deleted=deleted)
        return deleted
