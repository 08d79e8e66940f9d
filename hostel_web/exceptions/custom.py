class HostelApiError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class BookingSubmissionError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class SubmissionInProgressError(Exception):
    def __init__(self, draft_id: str):
        self.draft_id = draft_id
        super().__init__(f"Submission already in progress for draft {draft_id}")


class NotAuthenticatedError(Exception):
    def __init__(self, redirect_to: str = "/admin/login"):
        self.redirect_to = redirect_to
        super().__init__("Admin session required")


class RateLimitError(Exception):
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Rate limit exceeded for {service}")
