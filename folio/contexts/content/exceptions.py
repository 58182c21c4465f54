"""Custom exceptions for the content context."""


class InvalidResumeStructureError(ValueError):
    """
    Exception raised when a resume content tree or design is structurally unusable.

    This is raised only for root-level problems (e.g. the content tree is a list or a
    string instead of a mapping). Missing optional fields never raise; they are treated
    as absent.
    """

    pass
