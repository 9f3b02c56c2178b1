"""
Tests for the KPU upstream caller (httpx with a mock transport).
"""

from urllib.parse import parse_qs

import httpx
import pytest

from adapters.kpu_client import KpuUpstreamCaller, UpstreamConfig, mask_nik
from core.config import AppSettings
from core.domain.models import Nik
from core.errors import UpstreamServerError, UpstreamTransportError

UPSTREAM_URL = "http://upstream.test/ss8.php"


@pytest.fixture
def settings():
    return AppSettings(upstream_url=UPSTREAM_URL, http_timeout_seconds=7)


@pytest.fixture
def nik(valid_nik):
    return Nik.parse(valid_nik)


def caller_for(settings, transport):
    return KpuUpstreamCaller(settings, client=httpx.AsyncClient(transport=transport))


class TestKpuUpstreamCaller:
    """One form POST per call; failures split into client/server classes."""

    @pytest.mark.asyncio
    async def test_posts_fixed_form(self, settings, nik, make_transport, upstream_requests, result_page):
        response = await caller_for(settings, make_transport()).call(nik)

        assert response.status_code == 200
        assert response.body == result_page
        assert len(upstream_requests) == 1
        request = upstream_requests[0]
        assert request.method == "POST"
        assert str(request.url) == UPSTREAM_URL
        assert request.headers["content-type"] == "application/x-www-form-urlencoded"
        assert parse_qs(request.content.decode()) == {
            "nik_global": [nik.value],
            "g-recaptcha-response": [" "],
            "wilayah_id": ["0"],
            "cmd": ["Cari."],
        }

    @pytest.mark.asyncio
    async def test_default_timeout_from_config(self, settings, nik, make_transport, upstream_requests):
        await caller_for(settings, make_transport()).call(nik)
        assert upstream_requests[0].extensions["timeout"]["read"] == 7

    @pytest.mark.asyncio
    async def test_explicit_timeout(self, settings, nik, make_transport, upstream_requests):
        await caller_for(settings, make_transport()).call(nik, timeout=2.5)
        assert upstream_requests[0].extensions["timeout"]["read"] == 2.5

    @pytest.mark.asyncio
    async def test_config_overrides_settings(self, settings, nik, make_transport, upstream_requests):
        caller = KpuUpstreamCaller(
            settings,
            config=UpstreamConfig(url="http://stub.test/form.php"),
            client=httpx.AsyncClient(transport=make_transport()),
        )
        await caller.call(nik)
        assert str(upstream_requests[0].url) == "http://stub.test/form.php"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [500, 502, 503])
    async def test_server_error(self, settings, nik, make_transport, status):
        with pytest.raises(UpstreamServerError) as exc_info:
            await caller_for(settings, make_transport(status=status)).call(nik)
        assert exc_info.value.status_code == status
        assert str(status) in str(exc_info.value)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 403, 404])
    async def test_client_error_status(self, settings, nik, make_transport, status):
        with pytest.raises(UpstreamTransportError) as exc_info:
            await caller_for(settings, make_transport(status=status)).call(nik)
        assert exc_info.value.status_code == status

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [httpx.ConnectError, httpx.ReadTimeout, httpx.RemoteProtocolError])
    async def test_transport_failure(self, settings, nik, make_transport, error):
        with pytest.raises(UpstreamTransportError, match="talking to upstream") as exc_info:
            await caller_for(settings, make_transport(error=error)).call(nik)
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, error)

    @pytest.mark.asyncio
    async def test_invalid_url_is_client_error(self, nik):
        caller = KpuUpstreamCaller(AppSettings(upstream_url="not a url at all"))
        with pytest.raises(UpstreamTransportError):
            await caller.call(nik)


def test_mask_nik(valid_nik):
    assert mask_nik(Nik.parse(valid_nik)) == "************0123"
