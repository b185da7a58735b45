"""
Gunicorn configuration for the Corporate Card Ledger API.

Values can be tuned through environment variables; defaults suit a small
internal deployment.
"""
import os

# Server socket
bind = os.getenv("BIND", "0.0.0.0:8000")
backlog = 2048

# Worker processes
# UvicornWorker provides the ASGI support FastAPI needs
workers = int(os.getenv("WEB_CONCURRENCY", "2"))
worker_class = "uvicorn.workers.UvicornWorker"
worker_connections = 1000

# Workers silent for more than this many seconds are killed and restarted
timeout = 30
keepalive = 2
graceful_timeout = 30

# Logging
# Log to stdout/stderr (captured by systemd journald)
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process naming
proc_name = "card_ledger"

# Server mechanics (systemd manages the process)
daemon = False
pidfile = None

# Each worker builds its own engine; SQLite connections must not be shared across forks
preload_app = False

max_requests = 0
max_requests_jitter = 0
