from __future__ import annotations


class UniversityNotFoundError(LookupError):
    """Raised when an identifier does not match any registered university."""

    def __init__(self, university_id: str) -> None:
        super().__init__(f"University not found: {university_id!r}")
        self.university_id = university_id
