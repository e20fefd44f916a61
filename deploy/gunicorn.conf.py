"""Gunicorn configuration for the academic console service.

Usage:
    gunicorn main:app -c deploy/gunicorn.conf.py

All state (students, classes, sessions, criteria being edited) lives in
process memory, so the service runs as a single async worker: a second
worker would see a different set of directories and sessions.
"""

import os

# ─── Server socket ──────────────────────────────────────────────

bind = os.getenv("BIND", "0.0.0.0:5000")
backlog = 256

# ─── Worker processes ───────────────────────────────────────────

workers = 1
worker_class = "uvicorn.workers.UvicornWorker"

# ─── Timeouts ───────────────────────────────────────────────────
#
# Mock directories answer within ~1s (simulated latency), so the
# defaults only need headroom for slow clients.

timeout = 30
graceful_timeout = 10
keepalive = 5

# ─── Logging ────────────────────────────────────────────────────

accesslog = "-"                     # stdout
errorlog = "-"                      # stderr
loglevel = os.getenv("LOG_LEVEL", "info")

# ─── Process naming ─────────────────────────────────────────────

proc_name = "academic-console"

# ─── Server hooks ───────────────────────────────────────────────


def on_starting(server):
    """Called just before the master process is initialized."""
    server.log.info(
        "Starting academic console — workers=%d, timeout=%ds, bind=%s",
        workers,
        timeout,
        bind,
    )


def worker_exit(server, worker):
    """Called when a worker has been killed or exited."""
    server.log.info("Worker exit (pid: %s); in-memory data discarded", worker.pid)
