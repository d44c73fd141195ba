"""Client side: packets, receivers and a UDP socket that talks to one server."""