from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "pagequery_http_requests_total",
    "Total count of HTTP requests",
    labelnames=("method", "path", "status"),
)
REQUEST_LATENCY = Histogram(
    "pagequery_http_request_duration_seconds",
    "Latency distribution for HTTP requests",
    labelnames=("method", "path"),
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10),
)
QUERY_COUNT = Counter(
    "pagequery_queries_total",
    "Listing queries grouped by collection and outcome",
    labelnames=("collection", "outcome"),
)
QUERY_LATENCY = Histogram(
    "pagequery_query_duration_seconds",
    "Time spent filtering, sorting and paging one listing",
    labelnames=("collection",),
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1, 2),
)
