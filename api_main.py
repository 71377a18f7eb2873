import uvicorn

from weathertunes import config
from weathertunes.api import create_app

app = create_app()


if __name__ == "__main__":
    uvicorn.run("api_main:app", host=config.HOST, port=config.PORT)
