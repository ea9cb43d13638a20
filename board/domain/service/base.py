"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business rules that span several entities, or that
    need a repository or collaborator to be evaluated.
    """

    pass
