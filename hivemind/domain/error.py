"""Domain layer errors.

NotFound and Conflict errors are expected outcomes reported to the caller;
they are raised before any write of the failing operation is committed.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when an account attempts to edit something it doesn't own."""

    def __init__(self, resource: str, resource_id: str, account_id: str):
        super().__init__(
            f"Account {account_id} is not authorized to edit {resource} {resource_id}"
        )


class ContentDeletedError(DomainError):
    """Raised when attempting to edit deleted content or comments."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"Cannot edit deleted {resource} {resource_id}")


class ConflictError(DomainError):
    """The target is not in a state that allows the requested transition."""

    pass


class AlreadyVotedError(ConflictError):
    """Voter already has an active vote on the target.

    Switching direction requires withdrawing first.
    """

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"User has already voted on this {resource}: {resource_id}")


class NoVoteToWithdrawError(ConflictError):
    """Voter has never voted on the target."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"User has not voted on this {resource}: {resource_id}")


class VoteDirectionMismatchError(ConflictError):
    """Voter's current vote does not match the direction being withdrawn."""

    def __init__(self, resource: str, resource_id: str, direction: str):
        verb = "upvoted" if direction == "up" else "downvoted"
        super().__init__(f"User has not {verb} this {resource}: {resource_id}")


class AlreadyDeletedError(ConflictError):
    """Soft delete requested on an already deleted item."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} has already been deleted: {resource_id}")


class NotDeletedError(ConflictError):
    """Undelete requested on an item that is not deleted."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} has not been deleted: {resource_id}")


class CannotReplyToReplyError(ConflictError):
    """Replies may only be made to top-level comments."""

    def __init__(self, parent_id: str):
        super().__init__(
            f"Cannot reply to a reply ({parent_id}). Please reply to the parent comment."
        )


class HiveStatusConflictError(ConflictError):
    """Hive already has the requested archived/banned status."""

    def __init__(self, hive_name: str, flag: str, value: bool):
        state = flag if value else f"not {flag}"
        super().__init__(f"{hive_name} is already {state}!")


class StorageFailureError(DomainError):
    """The store failed or timed out; any writes of the operation were rolled back.

    Retryable by the caller. The engine never retries on its own.
    """

    retryable = True

    def __init__(self, operation: str, cause: str | None = None):
        self.operation = operation
        message = f"Storage failure during {operation}"
        if cause:
            message = f"{message}: {cause}"
        super().__init__(message)


class HiveNameTakenError(ConflictError):
    """A hive with the requested name already exists."""

    def __init__(self, name: str):
        super().__init__(f"Hive name is already taken: {name}")
