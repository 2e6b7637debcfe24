"""Development entry point: ``python app.py`` (settings picked by APP_ENV)."""

from roster_tracker.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"])
