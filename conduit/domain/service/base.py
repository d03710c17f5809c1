"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic that spans entities, such as the
    social graph or feed composition, and talk to the stores only through
    repository interfaces.
    """

    pass
