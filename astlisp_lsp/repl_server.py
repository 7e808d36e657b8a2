from __future__ import annotations

"""
Simple TCP REPL server for astlisp.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "program": [<node>, ...]}
- Response: {"ok": true, "results": ["3", "#t", ...]} or {"ok": false, "error": "<Kind>: <message>"}

All clients share one Interpreter. Its environment is immutable, so requests
from different client threads need no locking.
"""

import json
import logging
import socket
import threading
from typing import Any, Dict, Tuple

from astlisp.config import get_log_level, get_repl_address
from astlisp.errors import AstLispError, BadInput
from astlisp.interpreter import Interpreter
from astlisp.printer import to_display
from astlisp.reader.decoder import decode_node

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None):
        default_host, default_port = get_repl_address()
        self.host = host if host is not None else default_host
        self.port = port if port is not None else default_port
        self.interp = Interpreter()

    def handle_request(self, line: bytes | str) -> Dict[str, Any]:
        """Evaluate one request line and build its response object."""
        try:
            req = json.loads(line)
        except (json.JSONDecodeError, UnicodeDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        except RecursionError:
            return {"ok": False, "error": "Invalid request: nested too deeply"}
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected a JSON object"}

        if req.get("cmd") != "eval":
            return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}"}

        program = req.get("program")
        try:
            if not isinstance(program, list):
                raise BadInput("$: expected 'program' to be an array of nodes")
            nodes = [decode_node(obj, f"$[{i}]") for i, obj in enumerate(program)]
            results = [to_display(v) for v in self.interp.run(nodes)]
        except AstLispError as ex:
            return {"ok": False, "error": ex.describe()}
        except RecursionError:
            return {"ok": False, "error": "RecursionError: program nested too deeply"}
        return {"ok": True, "results": results}

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("astlisp REPL listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.debug("Client connected from %s:%d", *addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = self.handle_request(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.debug("Client %s:%d disconnected", *addr)


def main():
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
