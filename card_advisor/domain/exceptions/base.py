"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for catalog and recommendation errors.

    Every subclass carries a stable, machine-readable code which the API
    returns as the ``error`` field of the response body.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"
