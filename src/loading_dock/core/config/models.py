"""
Configuration data models for loading-dock.

The config file (``~/.ld`` by default) holds a single document:

    {"staged": ["path1", "path2"]}

Validation and (de)serialization go through Pydantic.
"""

from pydantic import BaseModel, Field, field_validator


class DockConfig(BaseModel):
    """
    The persisted staging area.

    ``staged`` keeps paths in the order they were staged and never holds
    the same string twice.

    Example:
        >>> cfg = DockConfig(staged=["a.txt", "b.txt"])
        >>> cfg.to_json()
        '{"staged":["a.txt","b.txt"]}'
    """

    staged: list[str] = Field(
        default_factory=list,
        description="File paths staged so far, in staging order",
    )

    @field_validator("staged")
    @classmethod
    def drop_repeated_paths(cls, v: list[str]) -> list[str]:
        """Keep the first occurrence of each path."""
        seen: set[str] = set()
        unique: list[str] = []
        for path in v:
            if path in seen:
                continue
            seen.add(path)
            unique.append(path)
        return unique

    def is_staged(self, file_name: str) -> bool:
        """Return True if ``file_name`` is already in the staging area."""
        for staged in self.staged:
            if staged == file_name:
                return True
        return False

    def to_json(self) -> str:
        """Serialize to the compact on-disk JSON form."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, json_str: str | bytes) -> "DockConfig":
        """Deserialize from JSON text."""
        return cls.model_validate_json(json_str)
