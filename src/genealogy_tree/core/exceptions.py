class GenealogyError(Exception):
    """Base exception for genealogy tree failures."""


class RecordParseError(GenealogyError):
    """Raised when a stored document cannot be read as a person record."""

    def __init__(self, doc_id, message):
        super().__init__(f"{doc_id or '<unknown>'}: {message}")
        self.doc_id = doc_id


class StoreError(GenealogyError):
    """Raised when the document store cannot be read or written."""


class PersonNotFoundError(StoreError):
    """Raised when an update targets a person that does not exist."""


class AuthorizationError(GenealogyError):
    """Raised when the caller is not privileged to write."""


class ValidationFailedError(GenealogyError):
    """Raised by the write path when a record has validation violations."""

    def __init__(self, person_id, violations):
        super().__init__(
            f"{person_id or '<new person>'} failed validation with {len(violations)} violation(s)"
        )
        self.person_id = person_id
        self.violations = list(violations)


class TreeLoadError(GenealogyError):
    """Raised when the tree cannot be loaded and rendered."""
