REDIRECTS_LISTED = 'REDIRECTS_LISTED'
REDIRECTS_UNAVAILABLE = 'REDIRECTS_UNAVAILABLE'
