import uvicorn

from homestock.core.config import settings


def main() -> None:
    uvicorn.run("homestock.main:app", host=settings.HOST, port=settings.PORT, reload=False)


if __name__ == "__main__":
    main()
