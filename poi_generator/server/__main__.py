import uvicorn

from poi_generator.config import get_settings
from poi_generator.server.app import create_app


def main() -> None:
    settings = get_settings()
    uvicorn.run(create_app(), host=settings.server_host, port=settings.server_port, reload=False)


if __name__ == "__main__":
    main()
