"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services hold repositories and coordinate logic spanning several entities.
    """

    pass
