"""HTTP and performance constants."""

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

# Requests slower than this many seconds are logged as slow_request
SLOW_REQUEST_THRESHOLD = 5.0
