MISSING_PARAMETERS = 'MISSING_PARAMETERS'
LONG_URL_RENDERED = 'LONG_URL_RENDERED'
