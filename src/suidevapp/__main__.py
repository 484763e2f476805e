from suidevapp.cli import app

app()
