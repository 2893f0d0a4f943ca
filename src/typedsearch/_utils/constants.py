# Environment variables
ENV_BASE_URL = "TYPEDSEARCH_URL"
ENV_API_KEY = "TYPEDSEARCH_API_KEY"
ENV_USERNAME = "TYPEDSEARCH_USERNAME"
ENV_PASSWORD = "TYPEDSEARCH_PASSWORD"
ENV_COMPATIBILITY_VERSION = "TYPEDSEARCH_COMPATIBILITY_VERSION"
ENV_TIMEOUT = "TYPEDSEARCH_TIMEOUT"
ENV_MAX_RETRIES = "TYPEDSEARCH_MAX_RETRIES"
ENV_CA_CERTS = "TYPEDSEARCH_CA_CERTS"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_AUTHORIZATION = "Authorization"
HEADER_USER_AGENT = "User-Agent"
HEADER_RETRY_AFTER = "Retry-After"

# Wire format
MEDIA_TYPE_TEMPLATE = "application/vnd.elasticsearch+json;compatible-with={version}"
DEFAULT_COMPATIBILITY_VERSION = 8

DEFAULT_BASE_URL = "http://localhost:9200"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3

USER_AGENT_PRODUCT = "TypedSearch.Python"
