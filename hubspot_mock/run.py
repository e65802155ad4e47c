"""Console entry point: serve the CRM API stand-in with uvicorn."""

import uvicorn

from hubspot_mock.conf.config import get_settings


def main() -> None:
    settings = get_settings()

    print(f"Starting CRM API stand-in on port {settings.PORT}...")

    uvicorn.run(
        "hubspot_mock.server.main:app",
        host=settings.HOST,
        port=settings.PORT,
        proxy_headers=True,
        forwarded_allow_ips="*",
    )


if __name__ == "__main__":
    main()
