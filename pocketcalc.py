"""
PocketCalc
Main application entry point: the calculator window, optionally with the API
"""
import argparse
import atexit
import os
import subprocess
import sys

import config


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=f"{config.APP_NAME} {config.VERSION}")
    parser.add_argument(
        "--api", action="store_true", default=config.START_WEB_API,
        help="also serve the calculator API from a background process",
    )
    parser.add_argument(
        "--no-gui", action="store_true",
        help="serve the calculator API in this process and open no window",
    )
    parser.add_argument("--host", default=config.WEB_HOST, help="API interface to bind")
    parser.add_argument("--port", type=int, default=config.WEB_PORT, help="API port")
    parser.add_argument("--dark", action="store_true", default=config.DARK_MODE,
                        help="use the dark palette")
    return parser.parse_args(argv)


def spawn_api(host, port):
    """Start api.py in a child process, stopped again when we exit"""
    api_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'api.py')
    process = subprocess.Popen(
        [sys.executable, api_path, '--host', host, '--port', str(port)],
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )
    atexit.register(stop_api, process)
    print(f"API server started (PID: {process.pid}) on http://{host}:{port}/api")
    return process


def stop_api(process):
    if process.poll() is not None:
        return
    process.terminate()
    try:
        process.wait(timeout=5)
    except subprocess.TimeoutExpired:
        process.kill()
    print("API server stopped")


def run_gui(dark_mode):
    # Tk is only needed when a window is opened
    import tkinter as tk
    from gui import CalculatorGUI

    root = tk.Tk()
    CalculatorGUI(root, dark_mode=dark_mode)
    root.mainloop()


def main(argv=None):
    args = parse_args(argv)

    if args.no_gui:
        import api
        api.serve(args.host, args.port)
        return

    process = spawn_api(args.host, args.port) if args.api else None
    try:
        run_gui(args.dark)
    finally:
        if process is not None:
            stop_api(process)


if __name__ == "__main__":
    main()
