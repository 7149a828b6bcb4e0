import argparse
import os
from pathlib import Path

import uvicorn

from main import DEFAULT_HOST, DEFAULT_PORT


def main():
    parser = argparse.ArgumentParser(description="Run the project tracker API server.")
    parser.add_argument("--host", type=str, default=os.getenv("HOST", DEFAULT_HOST), help="Interface to bind.")
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", DEFAULT_PORT)), help="Port to listen on.")
    parser.add_argument("--data-dir", type=str, default=None, help="Directory holding projects.json and tasks.json.")
    parser.add_argument("--reload", action='store_true', help="Restart the server when source files change.")

    args = parser.parse_args()

    if args.data_dir:
        data_dir = Path(args.data_dir)
        if data_dir.exists() and not data_dir.is_dir():
            print(f"Error: {data_dir} is not a directory")
            return
        # The app reads DATA_DIR per request, so this also reaches reloaded workers
        os.environ["DATA_DIR"] = str(data_dir)

    uvicorn.run("main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
