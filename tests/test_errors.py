from linksocket.errors import ClientSocketError, SendError, ServerSocketError


def test_client_message_error_text():
    assert str(ClientSocketError("boom")) == "Client socket error: boom"


def test_client_message_kept():
    err = ClientSocketError("Unknown sender.")
    assert err.message == "Unknown sender."
    assert err.cause is None


def test_client_wrapped_error_shows_cause():
    cause = OSError("connection refused")
    err = ClientSocketError(cause=cause)
    assert str(err) == str(cause)
    assert err.__cause__ is cause


def test_client_error_is_exception_with_message():
    err = ClientSocketError("boom")
    assert issubclass(ClientSocketError, Exception)
    assert err.message == "boom"
    assert str(err) == "Client socket error: boom"


def test_server_wrapped_error_shows_cause():
    cause = ValueError("bad")
    err = ServerSocketError(cause)
    assert str(err) == "bad"
    assert err.__cause__ is cause


def test_send_error_shows_ipv4_address():
    err = SendError(("127.0.0.1", 14191))
    assert str(err) == "127.0.0.1:14191"
    assert err.address == ("127.0.0.1", 14191)


def test_send_error_shows_ipv6_address_in_brackets():
    assert str(SendError(("::1", 9000))) == "[::1]:9000"


def test_send_error_is_server_socket_error():
    err = SendError(("127.0.0.1", 14192))
    assert issubclass(SendError, ServerSocketError)
    assert err.address == ("127.0.0.1", 14192)
    assert str(err) == "127.0.0.1:14192"