"""Domain service base class."""


class Service:
    """Marker base for domain services.

    A service owns the rules around one aggregate and is the only caller of
    that aggregate's repository.
    """
