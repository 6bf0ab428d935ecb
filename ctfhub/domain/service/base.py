"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business rules that span more than one entity,
    such as membership checks between teams and users. They never see
    bearer tokens; use cases pass them a verified identity.
    """

    pass
