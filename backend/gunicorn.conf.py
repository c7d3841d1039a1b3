# The JSON document is guarded by an in-process lock: one worker, many threads.
wsgi_app = "wsgi:app"
bind = "0.0.0.0:8000"
workers = 1
threads = 8
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr (collected by Docker)
accesslog = "-"
errorlog = "-"
loglevel = "info"  # override with env LOG_LEVEL

# Trust proxy headers
forwarded_allow_ips = "*"
proxy_protocol = False
