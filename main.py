"""Run the Monitoring API with uvicorn."""

from monitoring_api.main import run


if __name__ == "__main__":
    run()
