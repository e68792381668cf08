"""
Error taxonomy shared by services and the HTTP layer.

Services raise these; app.main registers handlers that render them as
``{"message": ...}`` JSON bodies with the matching status code.
"""


class PlantStoreError(Exception):
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"message": self.message}


class ValidationError(PlantStoreError):
    """Missing or invalid input."""


class ConflictError(PlantStoreError):
    """Resource already exists."""


class AuthError(PlantStoreError):
    # Same text for unknown email and wrong password
    def __init__(self, message: str = "Email or password is incorrect") -> None:
        super().__init__(message)


class StorageError(PlantStoreError):
    """The data store failed. The driver message is echoed to the client."""

    status_code = 500

    def __init__(self, detail: str) -> None:
        super().__init__("Database error")
        self.detail = detail

    def to_dict(self) -> dict:
        return {"message": self.message, "error": self.detail}
