"""Repository-level exceptions for the Registry bounded context.

Repositories raise these instead of leaking SQLAlchemy errors, so the
application and presentation layers never depend on the ORM.
"""


class StorageError(Exception):
    """Raised when the backing store fails to execute an operation.

    Wraps the original driver error as ``__cause__``. Operations are not
    retried; the surrounding transaction is rolled back.
    """

    def __init__(self, operation: str):
        super().__init__(f"Storage operation failed: {operation}")
        self.operation = operation
