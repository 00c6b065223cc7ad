MISSING_SLUG = 'MISSING_SLUG'
REDIRECT_NOT_FOUND = 'REDIRECT_NOT_FOUND'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
DELETE_FAILED = 'DELETE_FAILED'
REDIRECT_DELETED = 'REDIRECT_DELETED'
