from enum import Enum
from typing import Final, Literal


class Status(Enum):
    TODO = ("todo", 0, "[ ]")
    DONE = ("done", 1, "[x]")
    PENDING = ("pending", 2, "[p]")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def rank(self) -> int:
        return self.value[1]

    @property
    def glyph(self) -> str:
        return self.value[2]

    @classmethod
    def from_string(cls, value: str) -> "Status":
        """Map a raw status value to a Status; unknown or blank values are TODO."""
        token = (value or "").strip().lower()
        for status in cls:
            if status.code == token:
                return status
        return cls.TODO


TaskStatusCode = Literal["todo", "done", "pending"]

_CANONICAL_CODES: Final[frozenset[str]] = frozenset({"todo", "done", "pending"})


def normalize_status(value: "str | Status") -> TaskStatusCode:
    """Normalize status input to its canonical code.

    Unlike ``Status.from_string`` this is strict: mutation paths must not
    silently turn a typo into ``todo``.
    """
    if isinstance(value, Status):
        return value.code  # type: ignore[return-value]
    token = (value or "").strip().lower()
    if token in _CANONICAL_CODES:
        return token  # type: ignore[return-value]
    raise ValueError(f"Invalid task status: {value!r}")
