from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

from services.nbp_client import NBP_TABLE_A_URL, FetchError, NbpHttpClient


def _mock_response(content: bytes, status_code: int = 200) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.content = content
    response.raise_for_status.return_value = None
    return response


def test_fetch_returns_raw_body_bytes() -> None:
    session = Mock()
    session.request.return_value = _mock_response(b"<tabela_kursow>\xb3</tabela_kursow>")

    client = NbpHttpClient(timeout=3.5, session=session)
    data = client.fetch(NBP_TABLE_A_URL)

    assert data == b"<tabela_kursow>\xb3</tabela_kursow>"
    session.request.assert_called_once_with("GET", NBP_TABLE_A_URL, timeout=3.5)


def test_fetch_wraps_http_status_errors() -> None:
    error_response = Mock()
    error_response.status_code = 404
    response = _mock_response(b"not found", status_code=404)
    response.raise_for_status.side_effect = requests.HTTPError("404", response=error_response)
    session = Mock()
    session.request.return_value = response

    client = NbpHttpClient(session=session)
    with pytest.raises(FetchError) as exc_info:
        client.fetch("https://example.com/lastA.xml")

    assert exc_info.value.url == "https://example.com/lastA.xml"
    assert exc_info.value.status_code == 404
    assert isinstance(exc_info.value.__cause__, requests.HTTPError)


@pytest.mark.parametrize("error", [requests.Timeout("slow"), requests.ConnectionError("down")])
def test_fetch_wraps_transport_errors(error: requests.RequestException) -> None:
    session = Mock()
    session.request.side_effect = error

    client = NbpHttpClient(session=session)
    with pytest.raises(FetchError) as exc_info:
        client.fetch("https://example.com/lastA.xml")

    assert exc_info.value.status_code is None
    assert exc_info.value.__cause__ is error
    session.request.assert_called_once()


def test_client_uses_default_timeout() -> None:
    session = Mock()
    session.request.return_value = _mock_response(b"")

    NbpHttpClient(session=session).fetch("https://example.com/lastA.xml")

    assert session.request.call_args.kwargs["timeout"] == 10.0


@pytest.mark.parametrize("timeout", [0, -1])
def test_client_rejects_non_positive_timeout(timeout: float) -> None:
    with pytest.raises(ValueError):
        NbpHttpClient(timeout=timeout, session=Mock())
