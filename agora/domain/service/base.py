"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    A service coordinates several repositories (comments, votes,
    commentables, authors) around rules no single model owns.
    """
