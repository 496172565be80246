"""Save payload shape."""

from typing import Any

from pydantic import Field, ValidationError

from npcforge.schemas.base import RecordModel
from npcforge.schemas.character import CharacterRecord


class SaveFormatError(ValueError):
    """A persisted payload does not have the expected shape."""


class SavePayload(RecordModel):
    """Everything needed to rebuild a population.

    ``used_names`` holds ``faction:full name`` keys so a reloaded session
    never reissues a name.
    """

    characters: list[CharacterRecord] = Field(default_factory=list)
    used_names: list[str] = Field(default_factory=list)

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def parse(cls, data: Any) -> "SavePayload":
        """Validate raw payload data.

        Raises:
            SaveFormatError: If the data is not a valid save payload.
        """
        if isinstance(data, cls):
            return data
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise SaveFormatError(f"Malformed save payload: {e.error_count()} error(s)") from e
