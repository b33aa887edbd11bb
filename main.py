# main.py
from picstash.main import create_app

app = create_app()
