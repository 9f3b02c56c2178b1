"""Shared fixtures: KPU result pages and a silenced structlog."""

import logging

import httpx
import pytest
import structlog

VALID_NIK = "3171234567890123"

RESULT_PAGE = """
<html><body>
<div class="form"><div class="label">NIK</div><div class="field">3171234567890123</div></div>
<div class="form"><div class="label">Nama</div><div class="field">John Doe</div></div>
<div class="form"><div class="label">&nbsp;</div><div class="field"></div></div>
<div class="form"><div class="label">Tempat/Tgl&nbsp;Lahir:</div><div class="field"> Jakarta, 01-01-1990 </div></div>
<div class="form"><div class="label">Alamat TPS</div><div class="field">RT&nbsp;001 / RW&nbsp;002</div></div>
</body></html>
"""

EMPTY_PAGE = "<html><body><p>Data tidak ditemukan</p></body></html>"


@pytest.fixture(autouse=True, scope="session")
def quiet_structlog():
    """Keep pipeline logs out of captured stdout; `capture_logs` still works."""
    structlog.configure(
        processors=[structlog.processors.KeyValueRenderer()],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def valid_nik():
    return VALID_NIK


@pytest.fixture
def result_page():
    return RESULT_PAGE


@pytest.fixture
def empty_page():
    return EMPTY_PAGE


@pytest.fixture
def upstream_requests():
    """Requests seen by the mock upstream, in order."""
    return []


@pytest.fixture
def make_transport(upstream_requests):
    """Build an `httpx.MockTransport` that answers with `status`/`body` or raises `error`."""

    def factory(*, status=200, body=RESULT_PAGE, error=None):
        def handler(request: httpx.Request) -> httpx.Response:
            upstream_requests.append(request)
            if error is not None:
                raise error(f"{error.__name__} talking to upstream", request=request)
            return httpx.Response(status, text=body)

        return httpx.MockTransport(handler)

    return factory
