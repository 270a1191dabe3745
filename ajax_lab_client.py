"""AJAX Lab API client.

This module wraps the HTTP API served by ``ajax_lab_api`` with one
method per endpoint and reproduces the browser exercise comparing
synchronous and asynchronous requests:

* :meth:`AjaxLabClient.run_sequential` calls ``/slow`` and then
  ``/fast``, waiting for each answer before sending the next request.
  The fast answer therefore arrives after the slow one.
* :meth:`AjaxLabClient.run_concurrent` sends both requests at once from
  a thread pool.  The fast answer arrives first and the whole run takes
  roughly as long as the slow request alone.

Every endpoint method returns a tuple ``(data, error)``: ``data`` is
the decoded JSON body on success, ``error`` a dictionary with
``status_code`` and ``message`` on failure.  The client never raises
for HTTP or network errors.

Usage::

    python ajax_lab_client.py --base-url http://localhost:5000/api
"""

from __future__ import annotations

import argparse
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


@dataclass
class TimedCall:
    """Outcome of one request issued by a sequencing run.

    Attributes:
        name: Endpoint label, ``"slow"`` or ``"fast"``.
        data: Decoded response body, ``None`` on failure.
        error: Error dictionary, ``None`` on success.
        finished_after: Seconds between the start of the run and the
            arrival of this response.
    """

    name: str
    data: Optional[Any]
    error: Optional[Dict[str, Any]]
    finished_after: float


@dataclass
class SequencingReport:
    mode: str
    calls: List[TimedCall]
    elapsed: float

    @property
    def completion_order(self) -> List[str]:
        return [call.name for call in sorted(self.calls, key=lambda c: c.finished_after)]


class AjaxLabClient:
    """Client for the AJAX Lab API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL including the API prefix, e.g.
                ``http://localhost:5000/api``.
            timeout: Per‑request timeout in seconds.  It must exceed the
                server's slow delay for the timing demo to succeed.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request and decode the JSON answer.

        Returns:
            A tuple ``(data, error)`` as described in the module
            docstring.  The error message is taken from the ``error``
            or ``detail`` field of the response body when present.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Demo endpoints
    # ------------------------------------------------------------------
    def hello(self) -> Result:
        return self._request("GET", "/hello")

    def slow(self) -> Result:
        return self._request("GET", "/slow")

    def fast(self) -> Result:
        return self._request("GET", "/fast")

    def echo(self, payload: Any) -> Result:
        return self._request("POST", "/echo", json_body=payload)

    # ------------------------------------------------------------------
    # Calculations
    # ------------------------------------------------------------------
    def add(self, num1: Any) -> Result:
        """Ask the server for ``num1 + 20``; the server records the calculation."""
        return self._request("POST", "/add", json_body={"num1": num1})

    def setup_database(self) -> Result:
        return self._request("GET", "/setup-database")

    def save_calculation(self, num1: Any, result: Any = None) -> Result:
        return self._request("POST", "/save-calculation", json_body={"num1": num1, "result": result})

    def list_calculations(self) -> Result:
        return self._request("GET", "/calculations")

    def clear_calculations(self) -> Result:
        return self._request("DELETE", "/calculations")

    # ------------------------------------------------------------------
    # Verification, likes and comments
    # ------------------------------------------------------------------
    def verify_otp(self, otp: str) -> Result:
        return self._request("POST", "/verify-otp", json_body={"otp": otp})

    def like(self) -> Result:
        return self._request("POST", "/like")

    def likes(self) -> Result:
        return self._request("GET", "/likes")

    def comment(self, text: str) -> Result:
        return self._request("POST", "/comment", json_body={"comment": text})

    def comments(self) -> Result:
        return self._request("GET", "/comments")

    # ------------------------------------------------------------------
    # Sequencing demo
    # ------------------------------------------------------------------
    def _timed(self, name: str, started: float) -> TimedCall:
        data, error = getattr(self, name)()
        return TimedCall(name=name, data=data, error=error, finished_after=time.monotonic() - started)

    def run_sequential(self) -> SequencingReport:
        """Call ``/slow`` then ``/fast``, each only after the previous answer."""
        started = time.monotonic()
        calls = [self._timed("slow", started), self._timed("fast", started)]
        return SequencingReport(mode="sequential", calls=calls, elapsed=time.monotonic() - started)

    def run_concurrent(self) -> SequencingReport:
        """Send ``/slow`` and ``/fast`` at the same time and wait for both."""
        started = time.monotonic()
        with ThreadPoolExecutor(max_workers=2) as pool:
            futures = [pool.submit(self._timed, name, started) for name in ("slow", "fast")]
            calls = [future.result() for future in futures]
        return SequencingReport(mode="concurrent", calls=calls, elapsed=time.monotonic() - started)


def _print_report(report: SequencingReport) -> None:
    print(f"{report.mode}: finished in {report.elapsed:.2f}s")
    for call in sorted(report.calls, key=lambda c: c.finished_after):
        outcome = call.data.get("message") if call.data else call.error
        print(f"  {call.name:<5} after {call.finished_after:.2f}s: {outcome}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compare sequential and concurrent AJAX Lab requests")
    parser.add_argument("--base-url", default="http://localhost:5000/api", help="API base URL including prefix")
    parser.add_argument("--timeout", type=float, default=15, help="Per-request timeout in seconds")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    client = AjaxLabClient(base_url=args.base_url, timeout=args.timeout)
    _, error = client.hello()
    if error:
        print(f"API not reachable: {error['message']}")
        return 1
    _print_report(client.run_sequential())
    _print_report(client.run_concurrent())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
