"""Server configuration, operating modes and the package error type."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

DEFAULT_OPENAPI_DIR = Path("../aps-sdk-openapi")


class MockError(Exception):
    """Raised when specifications cannot be read or parsed."""


class MockMode(Enum):
    """How the mock server produces its responses."""

    STATELESS = "stateless"
    """Return fixed responses taken from the OpenAPI examples."""

    STATEFUL = "stateful"
    """Keep resources in memory and answer from that state."""


def parse_mode(text: str) -> MockMode:
    """Parse a mode name, ignoring case."""
    lowered = text.lower()
    for mode in MockMode:
        if mode.value == lowered:
            return mode
    raise ValueError(f"Invalid mode: {text}. Use 'stateless' or 'stateful'")


@dataclass
class MockServerConfig:
    """Settings for a mock server instance."""

    mode: MockMode = MockMode.STATEFUL
    openapi_dir: Path = field(default_factory=lambda: DEFAULT_OPENAPI_DIR)
    state_file: Path | None = None
    verbose: bool = False
    host: str = "0.0.0.0"
    port: int = 3000

    def __post_init__(self) -> None:
        self.openapi_dir = Path(self.openapi_dir)
        if self.state_file is not None:
            self.state_file = Path(self.state_file)
        if isinstance(self.mode, str):
            self.mode = parse_mode(self.mode)