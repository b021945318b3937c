"""Custom exceptions.

instantpress raises only at serialization time; setters never fail.

Example:
    >>> from instantpress.core.exceptions import InstantPressError, MissingTitleError, SerializationError
    >>> isinstance(MissingTitleError(), SerializationError)
    True
    >>> try:
    ...     raise MissingTitleError()
    ... except InstantPressError as e:
    ...     print(f"Caught: {type(e).__name__}")
    Caught: MissingTitleError
"""

from __future__ import annotations


class InstantPressError(Exception):
    """Base exception for instantpress.

    Example:
        >>> from instantpress.core.exceptions import InstantPressError
        >>> e = InstantPressError("something went wrong")
        >>> str(e)
        'something went wrong'
    """


class SerializationError(InstantPressError):
    """Article could not be serialized."""


class MissingTitleError(SerializationError):
    """Article title <h1> is not set.

    Example:
        >>> from instantpress.core.exceptions import MissingTitleError
        >>> str(MissingTitleError())
        'Article title <h1> is required'
    """

    def __init__(self, message: str = "Article title <h1> is required") -> None:
        super().__init__(message)


class MissingCanonicalLinkError(SerializationError):
    """Article canonical link is not set.

    Example:
        >>> from instantpress.core.exceptions import MissingCanonicalLinkError
        >>> str(MissingCanonicalLinkError())
        'Canonical link is required'
    """

    def __init__(self, message: str = "Canonical link is required") -> None:
        super().__init__(message)
