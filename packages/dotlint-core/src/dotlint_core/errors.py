"""Fatal errors that abort a validation run.

Expected findings (missing files, bad syntax, ...) are never raised; rules
collect them as issues. Anything raised from here stops the whole run.
"""


class DotlintError(Exception):
    """Base exception for all run-aborting errors."""


class ConfigDocumentError(DotlintError):
    """Raised when a dotter configuration document cannot be read or parsed."""


class RepositoryQueryError(DotlintError):
    """Raised when git cannot be queried at all (not merely a failed query)."""
