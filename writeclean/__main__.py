import uvicorn

from .settings import settings


def main() -> None:
    uvicorn.run("writeclean.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
