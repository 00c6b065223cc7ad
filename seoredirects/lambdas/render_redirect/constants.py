MISSING_SLUG = 'MISSING_SLUG'
REDIRECT_NOT_FOUND = 'REDIRECT_NOT_FOUND'
REDIRECTS_UNAVAILABLE = 'REDIRECTS_UNAVAILABLE'
REDIRECT_RENDERED = 'REDIRECT_RENDERED'
