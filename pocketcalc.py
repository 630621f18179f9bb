"""
PocketCalc
Desktop entry point: the keypad window, optionally with the JSON API
running alongside it in a child process.
"""
import tkinter as tk
import subprocess
import sys
import os
import socket
import atexit
import config
from gui import PocketCalcGUI

API_ENDPOINTS = ('/api/edit', '/api/evaluate', '/api/press')

# Child process serving api.py, if started
api_process = None


def lan_address():
    """Best guess at this machine's LAN address, for phones on the same network"""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            # connect() on UDP sends nothing, it only picks a route
            s.connect(('10.255.255.255', 1))
            return s.getsockname()[0]
    except OSError:
        return '127.0.0.1'


def start_api_server():
    """Run api.py in a child process and print where it listens"""
    global api_process
    api_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'api.py')
    try:
        api_process = subprocess.Popen(
            [sys.executable, api_path],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        print(f"Failed to start API server: {e}")
        return

    base = f"http://{lan_address()}:{config.WEB_PORT}"
    print(f"API server started (PID: {api_process.pid})")
    for endpoint in API_ENDPOINTS:
        print(f"  POST {base}{endpoint}")


def stop_api_server():
    global api_process
    if api_process is None:
        return
    try:
        api_process.terminate()
        api_process.wait(timeout=5)
        print("API server stopped")
    except (OSError, subprocess.TimeoutExpired) as e:
        print(f"Error stopping API server: {e}")
    api_process = None


def main(with_api=True):
    if with_api:
        start_api_server()
        atexit.register(stop_api_server)

    root = tk.Tk()
    PocketCalcGUI(root)
    root.mainloop()

    stop_api_server()


if __name__ == "__main__":
    main(with_api="--no-api" not in sys.argv[1:])
