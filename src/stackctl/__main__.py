from stackctl.cli import app

app()
