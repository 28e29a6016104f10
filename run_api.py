"""
API server entry point.

Run this script to start the FastAPI server.
"""
from src.api.main import run_server

if __name__ == "__main__":
    run_server()
