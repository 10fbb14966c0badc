# WSGI entry point loaded by gunicorn as `tutorial_agent.wsgi:app`
from .app import create_app

app = create_app()
