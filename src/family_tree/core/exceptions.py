class FamilyTreeError(Exception):
    """Base exception for family tree failures."""


class ConfigError(FamilyTreeError):
    """Raised when the configuration file cannot be used."""


class SnapshotError(FamilyTreeError):
    """Raised when a JSON snapshot cannot be read."""


class PipelineExecutionError(FamilyTreeError):
    """Raised when the refresh pipeline fails unexpectedly."""


class EditError(FamilyTreeError):
    """Base class for rejected authoring operations."""


class EmptyNameError(EditError):
    """Raised when a member would be stored under a blank name."""


class DuplicateMemberError(EditError):
    """Raised when a create or rename targets a name already in use."""


class MemberNotFoundError(EditError):
    """Raised when an edit targets a name that is not in the store."""
