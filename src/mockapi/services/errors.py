"""Service layer exceptions."""


class ResourceNotFoundError(Exception):
    """Raised when a service is asked for a resource it considers absent."""

    def __init__(self, resource: str, resource_id: int):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} {resource_id} not found")
