"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business rules that span more than one entity,
    such as keeping reply counters in step with the comment tree.
    """

    pass
