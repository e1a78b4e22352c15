"""Run the API with uvicorn: python -m product_api [--host HOST] [--port PORT]."""

import argparse

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="Serve the Product API.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    args = parser.parse_args()
    uvicorn.run("product_api.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
