"""Prometheus metrics for model pipelines"""

from prometheus_client import Counter, Histogram

PIPELINE_RUNS = Counter(
    "modelgateway_pipeline_runs_total",
    "Total number of pipeline invocations",
    ["kind", "provider", "outcome"],
)

PIPELINE_STAGE_DURATION = Histogram(
    "modelgateway_pipeline_stage_duration_seconds",
    "Duration of a single pipeline stage in seconds",
    ["kind", "stage"],
    buckets=(0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0, float("inf")),
)

PIPELINE_FAILURES = Counter(
    "modelgateway_pipeline_failures_total",
    "Total number of pipeline stage failures",
    ["kind", "stage", "error_kind"],
)

REMOTE_FETCHES = Counter(
    "modelgateway_remote_fetches_total",
    "Total number of remote resources fetched for data URL conversion",
    ["status"],
)
