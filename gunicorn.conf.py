"""Gunicorn config for deployment."""
import os

# Bind to the platform's PORT or default 3000
bind = f"0.0.0.0:{os.environ.get('PORT', '3000')}"

# Uvicorn async workers — each loads its own copy of the voter snapshot.
# Tune via WEB_CONCURRENCY env var.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

# Searches are in-memory scans; a slow request means something is wrong
timeout = 60
graceful_timeout = 30
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"

# The reload watcher is for local editing only
raw_env = [f"APP_ENV={os.environ.get('APP_ENV', 'production')}"]
