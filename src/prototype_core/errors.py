# src/prototype_core/errors.py


class PrototypeNotFoundError(KeyError):
    """Raised when no prototype is registered under the requested key."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Prototype '{self.key}' not found"
