import os

# Bind Gunicorn to a local TCP port for Nginx proxying
bind = "127.0.0.1:&LISTEN_PORT"
# Number of worker processes; each request is handled independently
workers = int(os.getenv("WEB_WORKERS", "4"))
# Plain synchronous workers; the only blocking call is the oEmbed lookup
worker_class = "sync"
# Time to gracefully stop workers on restart/shutdown
graceful_timeout = 5
# Change working directory to the project root before loading app
chdir = "&PROJECT_ROOT"

# WSGI app module path for Gunicorn to load
wsgi_app = "tutorial_agent.wsgi:app"

# Kill and restart workers that block beyond this many seconds
timeout = 60
# File creation mask for logs to be group-readable/writable
umask = 0o007
# User account under which Gunicorn workers should run
user = "&USERNAME"
# Group under which Gunicorn workers should run (matches web server group)
group = "www-data"
# Error log file path
errorlog = "&PROJECT_ROOT/instance/&VERSION/&APP_NAME.log"
# Logging level for Gunicorn (defaults to INFO, can be overridden via LOG_LEVEL env var)
loglevel = os.getenv("LOG_LEVEL", "info").lower()
# Capture stdout/stderr of workers into Gunicorn logs
capture_output = True
# PID file to manage the Gunicorn process
pidfile = "&PROJECT_ROOT/instance/&VERSION/&APP_NAME.pid"
