"""Tests for IceServerProvisioner."""

from __future__ import annotations

from rendezvous.core.credentials import DEFAULT_STUN_URL, IceServerProvisioner, StaticTurnConfig
from rendezvous.models.ice import IceServer
from rendezvous.providers.turn.mock import MockTurnIssuer

STUN = IceServer(urls=DEFAULT_STUN_URL)


def _static() -> StaticTurnConfig:
    return StaticTurnConfig(
        url="turn:turn.example.com:3478", username="static-user", password="static-pass"
    )


class TestStaticTurnConfig:
    def test_to_ice_server(self) -> None:
        server = _static().to_ice_server()
        assert server.to_dict() == {
            "urls": "turn:turn.example.com:3478",
            "username": "static-user",
            "credential": "static-pass",
        }

    def test_password_is_hidden_in_repr(self) -> None:
        assert "static-pass" not in repr(_static())


class TestIceServerProvisioner:
    async def test_nothing_configured(self) -> None:
        servers = await IceServerProvisioner().get_ice_servers()
        assert servers == [STUN]

    async def test_custom_stun_url(self) -> None:
        provisioner = IceServerProvisioner(stun_url="stun:stun.example.com:3478")
        servers = await provisioner.get_ice_servers()
        assert servers == [IceServer(urls="stun:stun.example.com:3478")]

    async def test_static_only(self) -> None:
        servers = await IceServerProvisioner(static=_static()).get_ice_servers()
        assert servers == [STUN, _static().to_ice_server()]

    async def test_issuer_success(self) -> None:
        issuer = MockTurnIssuer()
        servers = await IceServerProvisioner(issuer).get_ice_servers()
        assert servers[0] == STUN
        assert servers[1:] == issuer.servers

    async def test_issuer_takes_precedence_over_static(self) -> None:
        issuer = MockTurnIssuer()
        servers = await IceServerProvisioner(issuer, _static()).get_ice_servers()
        assert _static().to_ice_server() not in servers
        assert issuer.calls == 1

    async def test_issuer_error_does_not_fall_back_to_static(self) -> None:
        issuer = MockTurnIssuer(error="http_500")
        servers = await IceServerProvisioner(issuer, _static()).get_ice_servers()
        assert servers == [STUN]

    async def test_issuer_exception_is_absorbed(self) -> None:
        issuer = MockTurnIssuer(raises=RuntimeError("network unreachable"))
        servers = await IceServerProvisioner(issuer).get_ice_servers()
        assert servers == [STUN]

    async def test_issuer_consulted_per_call(self) -> None:
        issuer = MockTurnIssuer()
        provisioner = IceServerProvisioner(issuer)
        await provisioner.get_ice_servers()
        await provisioner.get_ice_servers()
        assert issuer.calls == 2
