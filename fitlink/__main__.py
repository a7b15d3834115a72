from fitlink.cli import app

app(prog_name="fitlink")
