from dataclasses import dataclass
from typing import Any

from lms_store.domain.common.exceptions import BackendIdConflictError


def normalize_ref(value: Any) -> str | None:
    """Remote ids come as numbers or strings, compare them as stripped strings"""
    if value is None:
        return None
    normalized = str(value).strip()
    return normalized or None


@dataclass(frozen=True, slots=True)
class ExternalRef:
    """Identity of a course on both sides: local id and optional remote id"""

    local_id: str
    remote_id: str | None = None

    @property
    def is_synced(self) -> bool:
        return self.remote_id is not None

    def matches(self, other_id: Any) -> bool:
        candidate = normalize_ref(other_id)
        if candidate is None:
            return False
        return candidate in (normalize_ref(self.local_id), self.remote_id)

    def attach(self, remote_id: Any) -> "ExternalRef":
        """Bind the remote id. Allowed once; rebinding to the same id is a no-op."""
        normalized = normalize_ref(remote_id)
        if self.remote_id is not None and normalized != self.remote_id:
            raise BackendIdConflictError(
                course_id=self.local_id,
                current_backend_id=self.remote_id,
                new_backend_id=normalized,
            )
        return ExternalRef(local_id=self.local_id, remote_id=normalized)
