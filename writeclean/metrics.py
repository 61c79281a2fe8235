from prometheus_client import Counter, Histogram


REQUESTS = Counter("writeclean_requests_total", "Total API requests", ["endpoint"])
LATENCY = Histogram(
    "writeclean_request_latency_seconds",
    "Request latency",
    ["endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1)
)
FAILURES = Counter("writeclean_failures_total", "Failed analysis requests", ["endpoint", "error"])
TOKENS = Counter("writeclean_tokens_total", "Tokens produced by the analyzer")
