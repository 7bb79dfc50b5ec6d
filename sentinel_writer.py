#!/usr/bin/env python3
"""
Keep writing fresh keys to whichever node Sentinel reports as master.

Each iteration sets ``<uuid4> -> value-<uuid4>``, logs the key and sleeps.
A failed write is logged and the next one is tried straight away.
"""

import logging
import sys
import time
import uuid

import redis.sentinel

import writer_metrics


SENTINEL_HOSTS = [
    'redis-sentinel.redis-i1',
    'redis-sentinel.redis-i2',
    'redis-sentinel.redis-i3',
]
SENTINEL_PORT = 26379
SENTINELS = tuple((host, SENTINEL_PORT) for host in SENTINEL_HOSTS)
MASTER_NAME = 'mymaster'
WRITE_INTERVAL = 0.3

METRICS_HOST = '0.0.0.0'
METRICS_PORT = 9121  # 0 disables /metrics

logger = logging.getLogger(__name__)


def new_entry():
    key = str(uuid.uuid4())
    return key, f'value-{key}'


def connect_master(sentinels=SENTINELS, master_name=MASTER_NAME):
    sentinel = redis.sentinel.Sentinel(sentinels=sentinels)
    return sentinel.master_for(master_name)


def write_loop(master, interval=WRITE_INTERVAL, sleep=time.sleep):
    """Write forever; only the process ending (or ``sleep`` raising) stops it.

    Failures skip the pause and retry immediately.
    """
    while True:
        key, value = new_entry()
        try:
            master.set(key, value)
        except Exception as ex:
            logger.error('error: %s', ex)
            writer_metrics.record_write(False)
            continue
        else:
            logger.info('ok: %s', key)
            writer_metrics.record_write(True)
        sleep(interval)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s %(levelname)s %(message)s',
        stream=sys.stdout,
    )

    if METRICS_PORT:
        writer_metrics.start_metrics_server(METRICS_HOST, METRICS_PORT)
        logger.info('metrics on %s:%d/metrics', METRICS_HOST, METRICS_PORT)

    logger.info('writing to %r via sentinels %s', MASTER_NAME, SENTINELS)
    master = connect_master()
    try:
        write_loop(master)
    except KeyboardInterrupt:
        logger.info('interrupted, stopping')


if __name__ == '__main__':
    main()
