"""rendezvous quickstart: an in-process call setup between two users.

Uses mock collaborators so nothing needs a network, a Firebase project or a
TURN account. Shows:
- login and presence broadcasts
- an offer delivered live and pushed to the callee's device at once
- an answer, an ICE candidate and hang-up flowing back
- the ICE server list handed to clients

Run with:
    uv run python examples/quickstart.py
"""

from __future__ import annotations

import asyncio

from rendezvous import (
    IceServerProvisioner,
    MockPushProvider,
    MockTransport,
    MockTurnIssuer,
    SignalingServer,
)


async def main() -> None:
    transport = MockTransport()
    push = MockPushProvider()
    server = SignalingServer(transport, push=push, ice=IceServerProvisioner(MockTurnIssuer()))

    # --- Two clients connect and log in ------------------------------------
    await server.handle_login("sid-alice", "alice")
    await server.handle_login("sid-bob", "bob")
    await server.handle_store_token("sid-bob", "bob-device-token")

    print("Presence after login:")
    for entry in transport.broadcasts[-1]["data"]:
        print(f"  {entry['username']}: {'online' if entry['online'] else 'offline'}")

    # --- Alice calls Bob ----------------------------------------------------
    outcome = await server.handle_signal(
        "sid-alice", "offer", {"target": "bob", "type": "offer", "sdp": "v=0 ..."}
    )
    assert outcome is not None
    print(f"\nOffer: live={outcome.delivered_live} push={outcome.push_attempted}")
    print(f"  call id: {outcome.call_id}")

    await server.handle_signal("sid-bob", "answer", {"target": "alice", "sdp": "v=0 ..."})
    await server.handle_signal(
        "sid-bob",
        "ice-candidate",
        {"target": "alice", "candidate": {"candidate": "candidate:1 1 UDP ...", "sdpMid": "0"}},
    )
    await server.handle_signal("sid-alice", "end-call", {"target": "bob"})

    print("\nDelivered:")
    for item in transport.sent:
        print(f"  -> {item['to']} {item['event']} from {item['data']['sender']}")

    # --- Bob goes away; a new offer only reaches his device ---------------
    await server.handle_disconnect("sid-bob")
    outcome = await server.handle_signal("sid-alice", "offer", {"target": "bob", "sdp": "v=0"})
    assert outcome is not None
    print(f"\nOffer to offline bob: live={outcome.delivered_live} push={outcome.push_attempted}")
    print(f"Push notifications sent: {len(push.sent)}")

    # --- ICE servers --------------------------------------------------------
    print("\nICE servers:")
    for ice in await server.handle_get_ice_servers("sid-alice"):
        print(f"  {ice}")


if __name__ == "__main__":
    asyncio.run(main())
