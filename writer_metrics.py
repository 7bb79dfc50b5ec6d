from prometheus_client import Counter, Gauge, CollectorRegistry, generate_latest
from flask import Flask, Response
import threading
import time

# Own registry, no default process/platform metrics
REGISTRY = CollectorRegistry()
writes_counter = Counter(
    'sentinel_writes', 'Writes issued against the Sentinel-resolved master', ['result'], registry=REGISTRY
)
last_success_gauge = Gauge(
    'sentinel_write_last_success_timestamp_seconds', 'Unix time of the last successful write', registry=REGISTRY
)

# Report both results as 0 before the first write
for result in ('ok', 'error'):
    writes_counter.labels(result=result)

app = Flask(__name__)


@app.route("/metrics")
def metrics():
    return Response(generate_latest(REGISTRY), mimetype="text/plain")


def record_write(ok):
    if ok:
        writes_counter.labels(result='ok').inc()
        last_success_gauge.set(time.time())
    else:
        writes_counter.labels(result='error').inc()


def start_metrics_server(host, port):
    thread = threading.Thread(target=lambda: app.run(host=host, port=port), daemon=True)
    thread.start()
    return thread
