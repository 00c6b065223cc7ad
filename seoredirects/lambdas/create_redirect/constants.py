INVALID_JSON_BODY = 'INVALID_JSON_BODY'
INVALID_REQUEST_BODY = 'INVALID_REQUEST_BODY'
MISSING_REQUIRED_FIELDS = 'MISSING_REQUIRED_FIELDS'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
REDIRECT_SAVED = 'REDIRECT_SAVED'
REDIRECT_NOT_PERSISTED = 'REDIRECT_NOT_PERSISTED'
