class SEORedirectsError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:seoredirects_error'


class RedirectValidationError(SEORedirectsError):
    """Raised when a redirect request is missing required fields."""

    error_code = 'app:redirect_validation_error'

    def __init__(self, message: str, fields: tuple[str, ...] = ()):
        super().__init__(message)
        self.fields = fields


class ConfigurationError(SEORedirectsError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class InfrastructureError(SEORedirectsError):
    """Base exception for all infrastructure (AWS) errors."""

    error_code = 'infra:infrastructure_error'
