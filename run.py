"""
SQLCraft backend launcher

Usage:
    python run.py              # development (hot reload)
    python run.py --prod       # production (multiple workers)

Serves:
    - HTTP API:     http://localhost:5000/api/
    - API docs:     http://localhost:5000/docs
    - Health:       http://localhost:5000/health
"""
import argparse


def print_banner(host: str, port: int, prefix: str):
    """Print the startup banner"""
    banner = f"""
+--------------------------------------------------------------+
|                   SQLCraft Backend Server                    |
+--------------------------------------------------------------+
  HTTP API:     http://{host}:{port}{prefix}/
  API docs:     http://{host}:{port}/docs
  Health:       http://{host}:{port}/health
+--------------------------------------------------------------+
    """
    print(banner)


def run_server(
    host: str = None,
    port: int = None,
    reload: bool = True,
    workers: int = 1,
    debug: bool = False
):
    """
    Start the server

    Args:
        host: bind address
        port: bind port
        reload: hot reload (development)
        workers: worker processes (production)
        debug: verbose logging
    """
    import uvicorn
    from sqlcraft.core.config import get_settings
    from sqlcraft.core.logging import setup_logging

    settings = get_settings()

    host = host or settings.SERVER_HOST
    port = port or settings.SERVER_PORT

    setup_logging(debug or settings.DEBUG_MODE)
    print_banner(host, port, settings.API_PREFIX)

    print(f"Starting server @ http://{host}:{port}")
    print("Press Ctrl+C to stop\n")

    uvicorn.run(
        "sqlcraft.main:app",
        host=host,
        port=port,
        reload=reload,
        workers=workers if not reload else 1,  # reload only supports a single process
        log_level="debug" if debug else "info",
        access_log=debug,
    )


def main():
    parser = argparse.ArgumentParser(
        description="SQLCraft backend launcher",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py                    # development (hot reload)
  python run.py --prod             # production (multiple workers)
  python run.py --host 0.0.0.0     # bind address
  python run.py --port 8000        # bind port
  python run.py --debug            # verbose logging
        """
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="bind address (default from .env)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="bind port (default from .env)"
    )
    parser.add_argument(
        "--prod",
        action="store_true",
        help="production mode (no reload, multiple workers)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=4,
        help="worker processes (production only, default 4)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="debug logging"
    )

    args = parser.parse_args()

    run_server(
        host=args.host,
        port=args.port,
        reload=not args.prod,
        workers=args.workers,
        debug=args.debug
    )


if __name__ == "__main__":
    main()
