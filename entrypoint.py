"""Backend entrypoint. Starts uvicorn with the port taken from the environment."""
import os
import uvicorn

from psx_spotter.main import app


def main() -> None:
    port = int(os.environ.get("PSX_SPOTTER_PORT", "3000"))
    uvicorn.run(app, host="127.0.0.1", port=port)


if __name__ == "__main__":
    main()
