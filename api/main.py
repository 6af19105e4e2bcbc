import uvicorn
from .config import get_settings

def main() -> None:
    """Run the radar API with uvicorn."""
    settings = get_settings()
    uvicorn.run("api.app:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())

if __name__ == "__main__":
    main()
