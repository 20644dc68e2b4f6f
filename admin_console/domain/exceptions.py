"""Domain-specific exceptions — framework-independent."""


class DraftValidationError(Exception):
    """Raised when a draft fails client-side validation before dispatch."""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)


class BackendError(Exception):
    """Raised when the backend rejects a request or cannot be reached.

    A status_code of 0 means the request never produced an HTTP response
    (connection refused, timeout, ...).
    """

    def __init__(self, resource: str, status_code: int, message: str):
        self.resource = resource
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{resource}] {status_code}: {message}")


class EntityNotFoundError(BackendError):
    """Raised when a requested entity does not exist on the backend."""

    def __init__(self, entity_type: str, entity_id: str, message: str = ""):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            entity_type, 404, message or f"{entity_type} with id '{entity_id}' not found"
        )


class WorkflowError(Exception):
    """Raised when a step of a (possibly multi-step) workflow fails.

    Steps listed in completed_steps have already taken effect server-side;
    they are not rolled back.
    """

    def __init__(
        self,
        workflow: str,
        failed_step: str,
        completed_steps: list[str],
        cause: Exception,
    ):
        self.workflow = workflow
        self.failed_step = failed_step
        self.completed_steps = list(completed_steps)
        self.cause = cause
        super().__init__(f"{workflow}: step '{failed_step}' failed: {self.reason}")

    @property
    def reason(self) -> str:
        return getattr(self.cause, "message", None) or str(self.cause)

    @property
    def partially_applied(self) -> bool:
        return bool(self.completed_steps)
