from tsdoc_highlighter.cli.app import app

app()
