class IPKUError(Exception):
    """Base class for errors that end a single request with a 500."""


class TransportAddressMalformed(IPKUError):
    def __init__(self, address, reason):
        self.address = address
        self.reason = reason
        super().__init__(f"address {address}: {reason}")


class IPNotFound(IPKUError):
    def __init__(self, message="IP not found"):
        super().__init__(message)


class EncodingFailure(IPKUError):
    pass
