# SPDX-License-Identifier: MIT


class ValidationError(Exception):
    """Raised when a mutation is rejected. The store is left unchanged."""

    pass


class EmptyContentError(ValidationError):
    """Raised when text that must not be blank is empty or whitespace."""

    pass


class ProjectCapReachedError(ValidationError):
    """Raised when adding a project would exceed the ongoing project cap."""

    pass


class IntensityOutOfRangeError(ValidationError):
    pass


class InvalidDateError(ValidationError):
    pass


class CellOccupiedError(ValidationError):
    """Raised when an entry would move onto a (date, project) cell that already has one."""

    pass


class BackupFormatError(Exception):
    """Raised when a backup snapshot cannot be read or is missing collections."""

    pass
