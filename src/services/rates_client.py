from __future__ import annotations

from decimal import Decimal
from typing import Any

import requests
from pydantic import BaseModel, ValidationError
from requests import Response
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

from config import DEFAULT_RATES_URL
from domain.rates import parse_rate_table


class RatesAPIError(Exception):
    def __init__(self, message: str, *, status_code: int | None = None, payload: Any | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class RatesPayload(BaseModel):
    """Wire shape: ``{"rates": {"BTC-EUR": "23258.8865583847", ...}}``."""

    rates: dict[str, str]

    def to_rate_table(self) -> dict[str, Decimal]:
        return parse_rate_table(self.rates)


class RatesClient:
    def __init__(
        self,
        url: str = DEFAULT_RATES_URL,
        timeout: float = 10.0,
        session: requests.Session | None = None,
        retry_attempts: int = 5,
        retry_backoff_seconds: float = 1,
    ) -> None:
        if not url:
            msg = "url must be provided"
            raise ValueError(msg)

        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()

        retries = Retry(
            total=retry_attempts,
            backoff_factor=retry_backoff_seconds,
            status_forcelist=[429, 502, 503, 504],
            allowed_methods=frozenset({"GET"}),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retries)
        self._session.mount("https://", adapter)
        self._session.mount("http://", adapter)

    def get_rates(self) -> RatesPayload:
        payload = self._request("GET")
        try:
            return RatesPayload.model_validate(payload)
        except ValidationError as exc:
            raise RatesAPIError("Rates payload has unexpected shape", payload=payload) from exc

    def _request(self, method: str) -> dict[str, Any]:
        try:
            response = self._session.request(method, self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            resp = exc.response
            status_code = getattr(resp, "status_code", None)
            message, payload = self._extract_error(resp)
            raise RatesAPIError(message, status_code=status_code, payload=payload) from exc
        except requests.RequestException as exc:
            status_code = getattr(getattr(exc, "response", None), "status_code", None)
            raise RatesAPIError("Rates request failed", status_code=status_code) from exc

        try:
            payload_raw = response.json()
        except ValueError as exc:
            raise RatesAPIError("Rates endpoint returned invalid JSON", payload=response.text) from exc

        if not isinstance(payload_raw, dict):
            raise RatesAPIError("Rates endpoint returned unexpected payload type", payload=payload_raw)

        return payload_raw

    @staticmethod
    def _extract_error(response: Response | None) -> tuple[str, Any | None]:
        message = "Rates request failed"
        payload: Any | None = None
        if response is None:
            return message, payload

        try:
            payload = response.json()
            if isinstance(payload, dict):
                message = payload.get("message") or payload.get("error") or message
        except ValueError:
            payload = response.text
        return message, payload


__all__ = ["RatesAPIError", "RatesClient", "RatesPayload"]
