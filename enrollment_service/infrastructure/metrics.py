from prometheus_client import Counter, Histogram, generate_latest
from fastapi import Response

# HTTP
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

# Enrollments
enrollments_created_total = Counter('enrollments_created_total', 'Total enrollments created')
enrollments_deleted_total = Counter('enrollments_deleted_total', 'Total enrollments deleted')

login_attempts_total = Counter('login_attempts_total', 'Login attempts', ['result'])


def metrics_endpoint():
    """Prometheus metrics endpoint"""
    return Response(content=generate_latest(), media_type="text/plain")
