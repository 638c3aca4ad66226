"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InvalidArgumentError(Exception):
    """Raised when creation input is missing or malformed.

    ``field`` names the offending input (``None`` when the failure is not tied
    to a single field).
    """

    def __init__(self, field: str | None, reason: str):
        self.field = field
        self.reason = reason
        if field:
            super().__init__(f"Invalid argument '{field}': {reason}")
        else:
            super().__init__(f"Invalid argument: {reason}")
