"""Stand-in for the external tool: reads one JSON request, replies in frames.

Usage: fake_agent.py SCENARIO
"""

import json
import os
import signal
import sys
import time


def emit(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main() -> int:
    scenario = sys.argv[1] if len(sys.argv) > 1 else "hello"
    request = json.loads(sys.stdin.read() or "{}")

    if scenario == "hello":
        emit('{"content":"Hello"}\n{"content":" world"}\n{"done":true}\n')
    elif scenario == "echo":
        emit(json.dumps({"content": json.dumps(request)}) + "\n")
    elif scenario == "env":
        emit(json.dumps({"content": json.dumps(sorted(os.environ))}) + "\n")
    elif scenario == "error-frame":
        emit('{"error":"rate limited"}\n')
    elif scenario == "blank-error":
        emit('{"content":"ok"}\n{"error":" "}\n')
    elif scenario == "stderr":
        emit('{"content":"partial"}\n')
        sys.stderr.write("provider unavailable\n")
        sys.stderr.flush()
    elif scenario == "exit-code":
        emit('{"content":"partial"}\n')
        return 3
    elif scenario == "crash":
        emit('{"content":"partial"}\n')
        os.kill(os.getpid(), signal.SIGKILL)
    elif scenario == "no-newline":
        emit('{"content":"first"}\n{"content":" last"}')
    elif scenario == "chunked":
        for piece in ['{"cont', 'ent":"Hel', 'lo"}\n{"content"', ':" wor', 'ld"}\n']:
            emit(piece)
            time.sleep(0.02)
    elif scenario == "malformed":
        emit('{"content":"a"}\nnot json at all\n{"content":"b"}\n')
    elif scenario == "slow":
        time.sleep(1.0)
        emit('{"content":"late"}\n')
    elif scenario == "code":
        emit(json.dumps({"content": "Here you go:\n```python\nvalue = 2\n```\n"}) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
