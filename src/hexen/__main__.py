from hexen.cli import app

app()
