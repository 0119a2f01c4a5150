from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from flask import Response, request
import time
import functools


REQUEST_COUNT = Counter(
    'flask_request_count',
    'Total Flask Request Count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'flask_request_duration_seconds',
    'Flask Request Duration',
    ['method', 'endpoint']
)


CATALOG_SIZE = Gauge(
    'catalog_movies_loaded',
    'Number of movies loaded into the catalog at startup'
)


SEARCH_QUERY_COUNT = Counter(
    'flask_search_queries_total',
    'Total search queries',
    ['kind']
)

SEARCH_RESULTS_COUNT = Histogram(
    'flask_search_results',
    'Number of title search results returned'
)


MOVIE_VIEWS = Counter(
    'flask_movie_views_total',
    'Total movie page views',
    ['source']
)


def _status_code(response):
    if isinstance(response, tuple) and len(response) > 1:
        return response[1]
    return getattr(response, 'status_code', 200)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()

        try:
            response = f(*args, **kwargs)

            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=_status_code(response)
            ).inc()

            duration = time.time() - start_time
            REQUEST_DURATION.labels(
                method=request.method,
                endpoint=f.__name__
            ).observe(duration)

            return response

        except Exception:
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=500
            ).inc()
            raise

    return wrapper


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
