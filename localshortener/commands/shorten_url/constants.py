# Event codes
MISSING_URLS = 'MISSING_URLS'
MALFORMED_URL_ENTRY = 'MALFORMED_URL_ENTRY'
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
SHORTEN_FAILED = 'SHORTEN_FAILED'
