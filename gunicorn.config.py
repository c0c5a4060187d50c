# -*- coding: utf-8 -*-
"""

Copyright 2025
SPDX-License-Identifier: Apache-2.0

Description: GUNICORN CONFIGURATION
Reference: https://docs.gunicorn.org/en/stable/settings.html
Usage: gunicorn -c gunicorn.config.py testbackend.main:app
Notes:
- bind comes from HOST/PORT (or .env) through testbackend.config
- The timeout must exceed the longest /util/delay a test will request
- Allocations made through /util/allocate live in the worker that served the
request; with several workers, clear them once per worker
"""

# Standard
import os

# First-Party
# Import Pydantic Settings singleton
from testbackend.config import settings

# Bind to exactly what .env (or defaults) says
bind = f"{settings.host}:{settings.port}"

workers = int(os.environ.get("GUNICORN_WORKERS", "2"))  # A positive integer generally in the 2-4 x $(NUM_CORES)
worker_class = "uvicorn.workers.UvicornWorker"  # ASGI worker
timeout = 600  # Set a timeout of 600
loglevel = settings.log_level.lower()  # debug info warning error critical
max_requests = 100000  # The maximum number of requests a worker will process before restarting
max_requests_jitter = 100  # The maximum jitter to add to the max_requests setting.

# Optimization https://docs.gunicorn.org/en/stable/settings.html#preload-app
preload_app = True  # Load application code before the worker processes are forked.
reuse_port = True  # Set the SO_REUSEPORT flag on the listening socket

# pidfile = '/tmp/gunicorn-pidfile'
# errorlog = '/tmp/gunicorn-errorlog'
# accesslog = '/tmp/gunicorn-accesslog'
# access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s"'

# server hooks


def when_ready(server):
    server.log.info("Server is ready. Spawning workers")


def post_fork(server, worker):
    server.log.info("Worker spawned (pid: %s)", worker.pid)


def post_worker_init(worker):
    worker.log.info("worker initialization completed")


def worker_int(worker):
    worker.log.info("worker received INT or QUIT signal")


def worker_abort(worker):
    worker.log.info("worker received SIGABRT signal")


def worker_exit(server, worker):
    server.log.info("Worker exit (pid: %s)", worker.pid)


def child_exit(server, worker):
    server.log.info("Worker child exit (pid: %s)", worker.pid)
