"""Server side: packets, addresses, receivers, senders and UDP sockets for many clients."""