"""Domain exceptions."""


class ExternalServiceException(Exception):
    """An external service could not complete an operation."""

    def __init__(self, service_name: str, operation: str, reason: str) -> None:
        super().__init__(reason)
        self.service_name = service_name
        self.operation = operation
        self.reason = reason


class CandidateFeedError(ExternalServiceException):
    """Candidate dataset could not be acquired."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        failures: list[str] | None = None,
    ) -> None:
        super().__init__(
            service_name="candidate_feed", operation="fetch_candidates", reason=message
        )
        self.status_code = status_code
        self.failures = failures or []
