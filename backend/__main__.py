"""
Entry point for running the application with `python -m backend`.

Loads .env into the process environment before the app is imported.
"""
import uvicorn
from dotenv import load_dotenv

if __name__ == "__main__":
    load_dotenv()
    uvicorn.run("backend.main:app", host="0.0.0.0", port=8000, reload=True)
