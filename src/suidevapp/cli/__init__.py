from suidevapp.cli.app import app

__all__ = ["app"]
