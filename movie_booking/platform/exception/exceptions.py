class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class SeatConflictError(DomainError):
    """Requested seats are already held or already booked for the screening"""

    def __init__(self, message: str, *, seats: list[str] | None = None) -> None:
        self.seats = seats or []
        super().__init__(message, 400)


class VerificationError(DomainError):
    def __init__(self, message: str = 'Payment verification failed') -> None:
        super().__init__(message, 400)


class GatewayError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 502)


class ReceiptError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


class InternalError(CustomBaseError):
    def __init__(self, message: str = 'Internal server error') -> None:
        super().__init__(message, 500)


class NotifyError(CustomBaseError):
    def __init__(self, message: str = 'Error sending email') -> None:
        super().__init__(message, 500)
