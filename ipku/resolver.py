"""
Client IP resolution from the transport address and X-Forwarded-For.
"""
import ipaddress
import logging
import re

from ipku.errors import IPNotFound, TransportAddressMalformed

logger = logging.getLogger(__name__)

# Anything that cannot appear in a lower-case IPv4/IPv6 literal
_STRAY_CHARS = re.compile(r'[^a-f0-9.:]+')

LOOPBACK_V6 = ipaddress.IPv6Address('::1')


def split_host_port(hostport):
    """
    Split "host:port" or "[host]:port" into (host, port).

    The port may be empty. Raises TransportAddressMalformed when the
    address has no port separator or stray brackets/colons.
    """
    i = hostport.rfind(':')
    if i < 0:
        raise TransportAddressMalformed(hostport, 'missing port in address')

    if hostport.startswith('['):
        end = hostport.find(']')
        if end < 0:
            raise TransportAddressMalformed(hostport, "missing ']' in address")
        if end + 1 == len(hostport):
            raise TransportAddressMalformed(hostport, 'missing port in address')
        if end + 1 != i:
            if hostport[end + 1] == ':':
                raise TransportAddressMalformed(hostport, 'too many colons in address')
            raise TransportAddressMalformed(hostport, 'missing port in address')
        host = hostport[1:end]
        rest_host, rest_port = hostport[1:], hostport[end + 1:]
    else:
        host = hostport[:i]
        if ':' in host:
            raise TransportAddressMalformed(hostport, 'too many colons in address')
        rest_host, rest_port = hostport, hostport

    if '[' in rest_host:
        raise TransportAddressMalformed(hostport, "unexpected '[' in address")
    if ']' in rest_port:
        raise TransportAddressMalformed(hostport, "unexpected ']' in address")

    return host, hostport[i + 1:]


def join_host_port(host, port):
    if ':' in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def _pick_forwarded(forwarded_for, behind_proxy):
    forwarded_ips = forwarded_for.split(',')
    # Only one trusted proxy hop is modelled: it appends the address it
    # accepted the connection from, so the client sits one slot before it.
    if behind_proxy and len(forwarded_ips) > 1:
        candidate = forwarded_ips[-2]
    else:
        candidate = forwarded_ips[-1]
    return _STRAY_CHARS.sub('', candidate)


def resolve_ip(transport_addr, forwarded_for=None, behind_proxy=False):
    """
    Return the canonical text form of the client's IP address.

    The X-Forwarded-For value wins when it yields anything; otherwise the
    host part of ``transport_addr`` is used. IPv6 loopback is reported as
    127.0.0.1.
    """
    ip = ''
    if forwarded_for is not None:
        ip = _pick_forwarded(forwarded_for, behind_proxy)

    if not ip:
        ip, _ = split_host_port(transport_addr)

    try:
        address = ipaddress.ip_address(ip)
    except ValueError:
        logger.debug(f"Unparseable client address: {ip!r}")
        raise IPNotFound()

    # Zoned addresses (fe80::1%eth0) are not client addresses
    if getattr(address, 'scope_id', None):
        raise IPNotFound()

    if address.version == 6:
        if address == LOOPBACK_V6:
            return '127.0.0.1'
        if address.ipv4_mapped is not None:
            return str(address.ipv4_mapped)
    return str(address)
