"""
Custom Exception Hierarchy
Domain and application-level exceptions
"""


class DomainException(Exception):
    """Base exception for all domain errors"""
    pass


class AuthenticationException(DomainException):
    """Authentication failed"""
    pass


class MissingTokenException(AuthenticationException):
    """No bearer credential on a protected request"""

    def __init__(self, message: str = "Access token is missing"):
        super().__init__(message)


class InvalidTokenException(AuthenticationException):
    """Signature check failed or the payload is malformed"""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class ExpiredTokenException(AuthenticationException):
    """Token is past its expiry"""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class AuthorizationException(DomainException):
    """User not authorized for this operation"""
    pass


class LoginFailedException(DomainException):
    """Credentials rejected at login"""
    pass


class UnknownEmailException(LoginFailedException):
    """No user registered with the given email"""

    def __init__(self, email: str):
        self.email = email
        super().__init__("User not found")


class InvalidPasswordException(LoginFailedException):
    """Password does not match the stored digest"""

    def __init__(self):
        super().__init__("Invalid password")


class ValidationException(DomainException):
    """Data validation failed"""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class RepositoryException(DomainException):
    """Database operation failed"""
    pass


class ResourceNotFoundException(DomainException):
    """Requested resource not found"""

    def __init__(self, resource_type: str, identifier: str):
        self.resource_type = resource_type
        self.identifier = identifier
        super().__init__(f"{resource_type} not found: {identifier}")


class ReferenceNotFoundException(DomainException):
    """A referenced entity does not exist, so the dependent row cannot be written"""

    def __init__(self, resource_type: str, identifier: str):
        self.resource_type = resource_type
        self.identifier = identifier
        super().__init__(f"{resource_type} not found")


class EmployerNotFoundException(ReferenceNotFoundException):

    def __init__(self, identifier: str):
        super().__init__("Employer", identifier)


class CompanyNotFoundException(ReferenceNotFoundException):

    def __init__(self, identifier: str):
        super().__init__("Company", identifier)


class VacancyNotFoundException(ReferenceNotFoundException):

    def __init__(self, identifier: str):
        super().__init__("Vacancy", identifier)


class DuplicateResourceException(DomainException):
    """Resource already exists"""

    def __init__(self, resource_type: str, field: str, value: str):
        self.resource_type = resource_type
        self.field = field
        self.value = value
        super().__init__(f"{resource_type} with {field}='{value}' already exists")


class InvalidStatusTransitionException(DomainException):
    """Application status change not allowed from the current state"""

    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot change application status from {current} to {requested}")
