import os
import signal
import subprocess
import sys
from pathlib import Path

import pytest
from unodostres.console import PROMPT

ROOT = Path(__file__).resolve().parents[1]


def _start_cli(*args):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT / "src"), env.get("PYTHONPATH")]))
    return subprocess.Popen(
        [sys.executable, "-u", str(ROOT / "scripts" / "play_cli.py"), *args],
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        env=env,
    )


def _read_until_prompt(proc) -> bytes:
    seen = b""
    while PROMPT.encode() not in seen:
        ch = proc.stdout.read(1)
        if not ch:
            break
        seen += ch
    return seen


@pytest.mark.skipif(sys.platform == "win32", reason="needs POSIX SIGINT")
@pytest.mark.parametrize("args", [(), ("--thread",)])
def test_interrupt_exits_with_status_1(args):
    proc = _start_cli(*args)
    seen = _read_until_prompt(proc)
    assert PROMPT.encode() in seen
    proc.send_signal(signal.SIGINT)
    try:
        proc.wait(timeout=10)
    finally:
        if proc.poll() is None:
            proc.kill()
    out = seen + proc.stdout.read()
    err = proc.stderr.read()
    proc.stdin.close()
    assert proc.returncode == 1, err
    assert b"Game abandoned." in out
    assert b"Fatal Python error" not in err


def test_end_of_input_exits_with_status_1():
    proc = _start_cli("--thread")
    out, _ = proc.communicate(input=b"22\n", timeout=10)
    assert proc.returncode == 1
    assert b"Game abandoned." in out
