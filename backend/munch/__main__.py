import uvicorn

from munch.config import settings


def main():
    uvicorn.run("munch.main:app", host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    main()
