from enum import StrEnum


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        PROJECT_ROOT = 'PROJECT_ROOT'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'
        BASE_URL = 'BASE_URL'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'


class Defaults:
    """Default values used when configuration is silent."""

    BASE_URL = 'http://localhost:3000'
    REDIRECT_TYPE = 'website'
    REDIRECTS_FILE = 'data/redirects.json'
    DYNAMODB_TABLE = 'seo-redirects'
    AWS_REGION = 'us-east-1'
    SITE_TITLE = 'SEO Redirects Pro'


class Backend(StrEnum):
    """Supported storage backends (`active_backend` in the app config document)."""

    FILE = 'file'
    DYNAMODB = 'dynamodb'
    REDIS = 'redis'


# Slug allocation
SLUG_MAX_LENGTH = 100
FALLBACK_SLUG_PREFIX = 'redirect'

# Known Open Graph content types (not enforced server-side)
REDIRECT_TYPES = ('article', 'website', 'product', 'video', 'book', 'profile')

# Meta description length for rendered pages
META_DESCRIPTION_LENGTH = 160

# Number of related redirects listed on a rendered page
RELATED_REDIRECTS_LIMIT = 6

# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
