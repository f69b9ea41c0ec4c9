"""Run the API server: ``python -m printerhub``."""

import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv


def main() -> None:
    load_dotenv(Path.cwd() / ".env")
    uvicorn.run(
        "printerhub.api:create_app",
        factory=True,
        host=os.environ.get("PRINTERHUB_HOST", "0.0.0.0"),
        port=int(os.environ.get("PRINTERHUB_PORT", "8000")),
        log_config=None,
    )


if __name__ == "__main__":
    main()
