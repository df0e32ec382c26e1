"""Custom exceptions for review generation and reminder delivery."""


class ReviewServiceError(Exception):
    """Base exception for review service errors."""

    def __init__(self, message: str, status_code: int | None = None):
        """Initialize review service error.

        Args:
            message: Error message
            status_code: HTTP status code the error maps to, if any
        """
        self.status_code = status_code
        super().__init__(message)


class InvalidConfigurationError(ReviewServiceError):
    """Review template pool is empty or a template is malformed."""

    def __init__(self, message: str):
        """Initialize invalid configuration error.

        Args:
            message: Description of the configuration problem
        """
        super().__init__(message=message, status_code=500)


class InvalidArgumentError(ReviewServiceError, ValueError):
    """A caller passed a value outside the operation's contract."""

    def __init__(self, message: str):
        """Initialize invalid argument error.

        Args:
            message: Description of the offending argument
        """
        super().__init__(message=message, status_code=400)


class SelectionError(ReviewServiceError):
    """Descriptor selection violates the review selection bounds (400)."""

    def __init__(self, message: str, selected_count: int):
        """Initialize selection error.

        Args:
            message: User-facing explanation
            selected_count: Number of descriptors that were selected
        """
        self.selected_count = selected_count
        super().__init__(message=message, status_code=400)


class TransportFailureError(ReviewServiceError):
    """The email transport rejected a message."""

    def __init__(self, message: str, recipient: str | None = None):
        """Initialize transport failure.

        Args:
            message: Human-readable reason reported by the transport
            recipient: Address the message was meant for
        """
        self.recipient = recipient
        super().__init__(message=message, status_code=502)


class StoreFailureError(ReviewServiceError):
    """The data store could not be queried (500)."""

    def __init__(self, message: str):
        """Initialize store failure.

        Args:
            message: Description of the failed store operation
        """
        super().__init__(message=message, status_code=500)


class CompanyNotFoundError(ReviewServiceError):
    """Company not found (404)."""

    def __init__(self, identifier: str):
        """Initialize company not found error.

        Args:
            identifier: Slug or ID that was looked up
        """
        self.identifier = identifier
        super().__init__(
            message=f"Company {identifier} not found",
            status_code=404,
        )


class SubscriberNotFoundError(ReviewServiceError):
    """Subscriber not found (404)."""

    def __init__(self, subscriber_id: str):
        """Initialize subscriber not found error.

        Args:
            subscriber_id: ID of the subscriber that was not found
        """
        self.subscriber_id = subscriber_id
        super().__init__(
            message=f"Subscriber with ID {subscriber_id} not found",
            status_code=404,
        )


class SubscriptionNotFoundError(ReviewServiceError):
    """Subscriber is not subscribed to the company (404)."""

    def __init__(self, subscriber_id: str, company_id: str):
        """Initialize subscription not found error.

        Args:
            subscriber_id: ID of the subscriber
            company_id: ID of the company
        """
        self.subscriber_id = subscriber_id
        self.company_id = company_id
        super().__init__(
            message=(
                f"Subscription of subscriber {subscriber_id} "
                f"to company {company_id} not found"
            ),
            status_code=404,
        )


class SubscriptionClosedError(ReviewServiceError):
    """Subscription can no longer receive reminders (400)."""

    def __init__(self, message: str):
        """Initialize subscription closed error.

        Args:
            message: Why the subscription is closed
        """
        super().__init__(message=message, status_code=400)
