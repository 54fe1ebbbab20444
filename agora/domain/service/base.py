"""Base class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold the rules that span more than one aggregate, such as a
    vote touching both the item and its author's karma.
    """

    pass
