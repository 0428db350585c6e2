from prometheus_client import Counter, Gauge, Histogram

# HTTP layer, recorded by the middleware in main.py
http_requests = Counter(
    "usersearch_http_requests_total",
    "HTTP requests served",
    ["method", "endpoint", "status_code"],
)
http_errors = Counter(
    "usersearch_http_errors_total",
    "HTTP requests answered with status >= 400",
    ["method", "endpoint", "status_code"],
)
http_latency = Histogram(
    "usersearch_http_latency_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"],
)
http_in_progress = Gauge("usersearch_http_in_progress", "HTTP requests in progress")

# find-users queries
user_queries = Counter(
    "usersearch_queries_total",
    "Find-users queries by outcome",
    ["outcome"],
)
users_returned = Histogram(
    "usersearch_users_returned",
    "Users returned per successful query",
    buckets=(0, 1, 5, 10, 25, 50, 100, 500),
)
