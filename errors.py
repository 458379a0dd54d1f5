class BoardError(Exception):
    """Base class for every error the data layer raises."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ConnectionUnavailable(BoardError):
    """The local store could not be opened or the handle is closed."""


class StorageError(BoardError):
    pass


class ConstraintViolation(StorageError):
    """A foreign key, NOT NULL or UNIQUE constraint rejected the statement."""


class NotFound(BoardError):
    pass
