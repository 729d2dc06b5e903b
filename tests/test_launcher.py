"""Tests for the command line entry point."""

import subprocess

import pytest

import api
import pocketcalc

class FakeProcess:
    pid = 4242

    def __init__(self, hangs=False):
        self.hangs = hangs
        self.calls = []

    def poll(self):
        return None

    def terminate(self):
        self.calls.append("terminate")

    def wait(self, timeout=None):
        self.calls.append("wait")
        if self.hangs:
            raise subprocess.TimeoutExpired("api.py", timeout)

    def kill(self):
        self.calls.append("kill")

def test_defaults_open_window_without_api():
    args = pocketcalc.parse_args([])
    assert args.api is False
    assert args.no_gui is False
    assert args.host == "127.0.0.1"

def test_gui_only_by_default(monkeypatch):
    opened = []
    monkeypatch.setattr(pocketcalc, "run_gui", opened.append)
    monkeypatch.setattr(pocketcalc, "spawn_api", lambda *a: pytest.fail("API spawned"))
    pocketcalc.main([])
    assert opened == [False]

def test_api_flag_spawns_and_stops_server(monkeypatch):
    process = FakeProcess()
    spawned = []

    def fake_spawn(host, port):
        spawned.append((host, port))
        return process

    monkeypatch.setattr(pocketcalc, "spawn_api", fake_spawn)
    monkeypatch.setattr(pocketcalc, "run_gui", lambda dark: None)
    pocketcalc.main(["--api", "--port", "9001", "--dark"])

    assert spawned == [("127.0.0.1", 9001)]
    assert process.calls == ["terminate", "wait"]

def test_no_gui_serves_in_process(monkeypatch):
    served = []
    monkeypatch.setattr(api, "serve", lambda host, port: served.append((host, port)))
    monkeypatch.setattr(pocketcalc, "run_gui", lambda dark: pytest.fail("window opened"))
    pocketcalc.main(["--no-gui", "--host", "0.0.0.0"])
    assert served == [("0.0.0.0", 8888)]

def test_stop_api_kills_a_hung_server():
    process = FakeProcess(hangs=True)
    pocketcalc.stop_api(process)
    assert process.calls == ["terminate", "wait", "kill"]
