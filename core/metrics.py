"""
Prometheus metrics for the storefront.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Storefront metrics
product_page_views_total = Counter(
    "product_page_views_total",
    "Product detail pages rendered",
    ["entitlement"],
)

purchase_confirmations_shown_total = Counter(
    "purchase_confirmations_shown_total",
    "Post-checkout thank-you panels rendered",
    ["unlocks_companion_license"],
)

# Activation metrics
activation_deletions_total = Counter(
    "activation_deletions_total",
    "Activation delete attempts by outcome",
    ["outcome"],
)

activation_list_refreshes_total = Counter(
    "activation_list_refreshes_total",
    "Activation list fetches (page render and polling)",
)
