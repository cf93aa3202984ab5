"""
Data models for bootstrap connection outcomes.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class ConnectionResult:
    """Result of the single bootstrap connection attempt."""

    success: bool
    database: str
    connection: Optional[Any] = None
    error_message: Optional[str] = None
    display_message: Optional[str] = None
    notified: bool = False
    elapsed: Optional[float] = None

    @property
    def exit_message(self) -> Optional[str]:
        if self.success:
            return None
        return f"Error: {self.display_message}"
