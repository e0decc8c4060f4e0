"""
Startup configuration, read once from the command line.
"""
import argparse
from dataclasses import dataclass

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass(frozen=True)
class Settings:
    port: str = '80'
    behind_proxy: bool = False
    host: str = '0.0.0.0'
    log_level: str = 'INFO'


def _port(value):
    if not value.isdigit() or int(value) > 65535:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog='ipku',
        description='Get the public IP address of the client.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument('--port', '-port', type=_port, default=Settings.port,
                        help='set port for the server')
    parser.add_argument('--behind-proxy', '-behind-proxy', action='store_true',
                        default=Settings.behind_proxy,
                        help='set whether the server is running behind a proxy or not')
    parser.add_argument('--host', default=Settings.host,
                        help='address the server binds to')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS,
                        default=Settings.log_level, help='logging level')
    return parser


def parse_args(argv=None):
    args = build_parser().parse_args(argv)
    return Settings(
        port=args.port,
        behind_proxy=args.behind_proxy,
        host=args.host,
        log_level=args.log_level,
    )
