"""Default configuration constants for Kyber Transit."""

# Server settings
DEFAULT_SERVER_HOST = "0.0.0.0"
DEFAULT_SERVER_PORT = ":8080"
DEFAULT_KEM_SCHEME = "ml-kem-1024"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SHUTDOWN_TIMEOUT_S = 5.0

# Environment variable names
ENV_SERVER_PORT = "KYBER_SERVER_PORT"
ENV_SERVER_HOST = "KYBER_SERVER_HOST"
ENV_KEM_SCHEME = "KYBER_KEM_SCHEME"
ENV_LOG_LEVEL = "KYBER_LOG_LEVEL"
ENV_SHUTDOWN_TIMEOUT = "KYBER_SHUTDOWN_TIMEOUT"

# HTTP client settings (milliseconds)
DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_RETRY_DELAY_MS = 1_000
DEFAULT_MAX_RETRIES = 3

# Default retry status codes
DEFAULT_RETRY_STATUS_CODES = (408, 429, 502, 503, 504)
