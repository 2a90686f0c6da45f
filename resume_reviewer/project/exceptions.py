"""Errors raised by the project store."""


class ProjectError(Exception):
    """Base class for project store failures.

    Attributes:
        entity: Kind of entity involved (person, company, job, resume).
        identifier: Name or slug the caller used.
    """

    def __init__(self, message: str, entity: str, identifier: str):
        super().__init__(message)
        self.entity = entity
        self.identifier = identifier


class EntityNotFoundError(ProjectError):
    """A read or update targeted an entity that does not exist."""


class EntityExistsError(ProjectError):
    """A create targeted a slug that is already taken."""


class InvalidNameError(ProjectError):
    """A create was given a name with no letters or digits to slug."""
