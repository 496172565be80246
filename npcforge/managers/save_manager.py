"""Save slots: persist and restore population payloads."""

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from sqlalchemy import select
from sqlalchemy.orm import Session

from npcforge.database.models.save_slot import SaveSlot, SlotKind
from npcforge.schemas.save import SaveFormatError, SavePayload
from npcforge.world.population import PopulationDirectory

logger = logging.getLogger(__name__)


@dataclass
class SlotInfo:
    """Summary of a save slot."""

    slot_name: str
    kind: str
    world_seed: str | None
    character_count: int
    description: str | None
    updated_at: datetime


class SaveManager:
    """Reads and writes save slots in the relational store.

    Unlike the interaction managers this one works on a database session,
    not on the population directory.
    """

    def __init__(self, db: Session) -> None:
        """Initialize manager with database session.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def _get_slot(self, slot_name: str) -> SaveSlot | None:
        stmt = select(SaveSlot).where(SaveSlot.slot_name == slot_name)
        return self.db.execute(stmt).scalar_one_or_none()

    def save(
        self,
        slot_name: str,
        payload: SavePayload,
        world_seed: str | int | None = None,
        kind: str = SlotKind.MANUAL,
        description: str | None = None,
    ) -> SaveSlot:
        """Write a payload to a slot, overwriting any existing one."""
        data = payload.to_json_dict()
        slot = self._get_slot(slot_name)
        if slot is None:
            slot = SaveSlot(slot_name=slot_name, payload=data)
            self.db.add(slot)
        slot.payload = data
        slot.kind = kind
        slot.world_seed = str(world_seed) if world_seed is not None else None
        slot.character_count = len(payload.characters)
        slot.description = description
        self.db.flush()
        logger.info("Saved %d characters to slot %s", slot.character_count, slot_name)
        return slot

    def load(self, slot_name: str) -> SavePayload | None:
        """Read a slot's payload.

        Returns:
            The payload, or None if the slot does not exist.

        Raises:
            SaveFormatError: If the stored payload is malformed.
        """
        slot = self._get_slot(slot_name)
        if slot is None:
            return None
        payload = SavePayload.parse(slot.payload)
        logger.info("Loaded slot %s", slot_name)
        return payload

    def get_world_seed(self, slot_name: str) -> str | None:
        slot = self._get_slot(slot_name)
        return slot.world_seed if slot else None

    def list_slots(self) -> list[SlotInfo]:
        """All slots, most recently updated first."""
        stmt = select(SaveSlot).order_by(SaveSlot.updated_at.desc(), SaveSlot.id.desc())
        return [
            SlotInfo(
                slot_name=slot.slot_name,
                kind=slot.kind,
                world_seed=slot.world_seed,
                character_count=slot.character_count,
                description=slot.description,
                updated_at=slot.updated_at,
            )
            for slot in self.db.execute(stmt).scalars()
        ]

    def delete(self, slot_name: str) -> bool:
        slot = self._get_slot(slot_name)
        if slot is None:
            return False
        self.db.delete(slot)
        self.db.flush()
        logger.info("Deleted slot %s", slot_name)
        return True

    # =========================================================================
    # Directory helpers
    # =========================================================================

    def save_directory(
        self,
        slot_name: str,
        directory: PopulationDirectory,
        world_seed: str | int | None = None,
        kind: str = SlotKind.MANUAL,
        description: str | None = None,
    ) -> SaveSlot:
        """Save a directory. The seed defaults to the pipeline's."""
        return self.save(
            slot_name,
            directory.to_payload(),
            world_seed=world_seed if world_seed is not None else directory.pipeline.rng.seed,
            kind=kind,
            description=description,
        )

    def load_into(self, slot_name: str, directory: PopulationDirectory) -> int | None:
        """Replace a directory's population with a slot's.

        Returns:
            Number of characters loaded, or None if the slot does not exist.
        """
        payload = self.load(slot_name)
        if payload is None:
            return None
        return directory.load_payload(payload)

    # =========================================================================
    # Files
    # =========================================================================

    def export_slot(self, slot_name: str, path: Path) -> bool:
        """Write a slot's payload to a JSON file."""
        slot = self._get_slot(slot_name)
        if slot is None:
            return False
        path.write_text(json.dumps(slot.payload, indent=2), encoding="utf-8")
        return True

    def import_file(
        self,
        path: Path,
        slot_name: str,
        world_seed: str | None = None,
    ) -> SaveSlot:
        """Validate a JSON save file and store it in a slot.

        Raises:
            SaveFormatError: If the file is not valid JSON or not a save payload.
        """
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SaveFormatError(f"{path} is not valid JSON: {e}") from e
        payload = SavePayload.parse(data)
        return self.save(slot_name, payload, world_seed=world_seed)
