# Run the Flask development server: `python -m tutorial_agent`
from .app import create_app


def main() -> None:
    app = create_app()
    app.run(
        host=app.config["HOST"],
        port=app.config["PORT"],
        debug=app.config.get("DEBUG", False),
    )


if __name__ == "__main__":
    main()
