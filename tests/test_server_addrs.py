from linksocket.server.addrs import ServerAddrs


def test_default_addresses():
    addrs = ServerAddrs.default()
    assert addrs.session_listen_addr == ("127.0.0.1", 14191)
    assert addrs.webrtc_listen_addr == ("127.0.0.1", 14192)
    assert addrs.public_webrtc_addr == ("127.0.0.1", 14192)


def test_defaults_are_independent_instances():
    first = ServerAddrs.default()
    second = ServerAddrs.default()
    first.session_listen_addr = ("0.0.0.0", 14191)
    assert second.session_listen_addr == ("127.0.0.1", 14191)


def test_custom_addresses():
    addrs = ServerAddrs(("10.0.0.1", 1), ("10.0.0.1", 2), ("192.0.2.7", 2))
    assert addrs.session_listen_addr == ("10.0.0.1", 1)
    assert addrs.webrtc_listen_addr == ("10.0.0.1", 2)
    assert addrs.public_webrtc_addr == ("192.0.2.7", 2)
    assert addrs == ServerAddrs(("10.0.0.1", 1), ("10.0.0.1", 2), ("192.0.2.7", 2))