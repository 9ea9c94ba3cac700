"""Authentication exceptions.

These exceptions are raised by the tollgate_auth package and are caught at the
boundary of the application layer (AuthenticationService), where they are
turned into result values. Each carries the status code the caller sees.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    status: int = 400

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class AlreadyExistsError(AuthError):
    """Raised when registering an email that already has an account."""

    def __init__(self, message: str = "User already exists."):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login.

    Unknown email and wrong password share this error on purpose.
    """

    def __init__(self, message: str = "User/Password not valid."):
        super().__init__(message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    status = 401

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password cannot be hashed safely."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class ConflictError(Exception):
    """Raised by a user store when the unique email constraint rejects a write."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")
