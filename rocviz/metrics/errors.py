# rocviz/metrics/errors.py


class RocInputError(ValueError):
    """Base class for inputs the ROC routines refuse to evaluate."""


class InvalidInput(RocInputError):
    """Label/score shapes or grid size are unusable (checked before any work)."""


class DegenerateInput(RocInputError):
    """One class is absent, so a rate would divide by zero."""
