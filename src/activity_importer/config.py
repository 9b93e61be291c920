# src/activity_importer/config.py

from dataclasses import dataclass, field

from .models import Extension

SUPPORTED_EXTENSIONS = frozenset(ext.value for ext in Extension)
DEFAULT_ACCEPTED_EXTENSIONS = frozenset({"pdf", "csv"})


@dataclass(frozen=True)
class ImporterConfig:
    """Configuration for an `ActivityImporter`.

    Immutable. Explicit. No magic defaults from environment.
    """

    accepted_extensions: frozenset[str] = field(
        default_factory=lambda: DEFAULT_ACCEPTED_EXTENSIONS
    )
    max_file_size_mb: float = 20.0
    csv_delimiter: str | None = None  # Sniffed from the header line when None

    def __post_init__(self) -> None:
        # Membership checks are case-insensitive
        object.__setattr__(
            self,
            "accepted_extensions",
            frozenset(ext.lower() for ext in self.accepted_extensions),
        )
        unknown = self.accepted_extensions - SUPPORTED_EXTENSIONS
        if unknown:
            raise ValueError(
                f"Unsupported accepted_extensions: {sorted(unknown)}. "
                f"Supported: {sorted(SUPPORTED_EXTENSIONS)}"
            )
        if self.max_file_size_mb <= 0:
            raise ValueError("max_file_size_mb must be > 0")
