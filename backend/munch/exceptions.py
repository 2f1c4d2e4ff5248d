class MunchError(Exception):
    """Base class for errors raised by the service layer."""


class ValidationFailed(MunchError):
    pass


class NotFound(MunchError):
    pass


class EmptyCart(MunchError):
    pass


class DuplicateUser(MunchError):
    pass


class InvalidCredentials(MunchError):
    pass


class UnknownServiceError(MunchError, ValueError):
    """Raised by the service factory for a class it does not know how to build."""


class UnknownRouteError(MunchError, KeyError):
    def __str__(self):
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""
