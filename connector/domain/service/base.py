"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span repositories or that don't
    belong on a single aggregate.
    """

    pass
