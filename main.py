"""
Root entry point so the service can be started from the repository root:

    uvicorn main:app --host 0.0.0.0 --port 8000
"""
from salesgoals.main import app

__all__ = ["app"]

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
