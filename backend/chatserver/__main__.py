import uvicorn

from chatserver.core.config import settings


def main():
    uvicorn.run("chatserver.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
