"""
fanlog CLI - Send messages to terminal and file transports.

Installed as the `fanlog` command via pip:
    pip install fanlog
    fanlog "deploy finished"
    fanlog --level warn --file logs/app.log "disk almost full"
    tail -f build.out | fanlog --config fanlog.yaml --safe
"""
import sys
import argparse

from fanlog.config import ConfigLoader
from fanlog.errors import ConfigError, FanlogError
from fanlog.log import get_console, get_logger
from fanlog.logger import Logger
from fanlog.models import Level
from fanlog.transports import FileTransport, StandardStreamTransport, create_transport
from models import validate_config_file


def build_parser() -> argparse.ArgumentParser:
    from fanlog import __version__
    parser = argparse.ArgumentParser(description='fanlog - Multi-transport logger')
    parser.add_argument('--version', '-V', action='version', version=f'fanlog {__version__}')
    parser.add_argument('message', nargs='*', help='Message text (default: one message per stdin line)')
    parser.add_argument('--level', '-l', default='info', choices=[level.value for level in Level],
                        help='Message level (default: info)')
    parser.add_argument('--config', metavar='FILE', default='',
                        help='YAML transport configuration (default: $FANLOG_CONFIG or ./fanlog.yaml)')
    parser.add_argument('--file', metavar='PATH', action='append', default=[],
                        help='Also append to this log file (repeatable)')
    parser.add_argument('--stderr', action='store_true', help='Also write to stderr')
    parser.add_argument('--no-stdout', action='store_true', help='Drop stdout transports')
    parser.add_argument('--safe', action='store_true',
                        help='Fail with exit code 1 when a transport write fails')
    parser.add_argument('--list-transports', action='store_true',
                        help='Show configured transports and how they are rendered, then exit')
    parser.add_argument('--validate', metavar='FILE', help='Validate a config file and exit')
    parser.add_argument('--verbose', '-v', action='store_true', help='Show diagnostics on stderr')
    return parser


def main(argv=None):
    """Entry point for the `fanlog` CLI command."""
    args = build_parser().parse_args(argv)
    log = get_logger()
    log.setLevel("DEBUG" if args.verbose else "INFO")

    # Handle --validate
    if args.validate:
        result = validate_config_file(args.validate)
        get_console().info(result.format_report())
        sys.exit(0 if result.is_valid else 1)

    loader = ConfigLoader(config_path=args.config, logger=log.debug)
    try:
        transports = _open_transports(loader, args)
    except ConfigError as e:
        log.error(str(e))
        sys.exit(1)

    try:
        if args.list_transports:
            _list_transports(transports)
            sys.exit(0)
        exit_code = _log_messages(Logger(transports), args)
    finally:
        for transport in transports:
            transport.close()
    sys.exit(exit_code)


def _open_transports(loader: ConfigLoader, args) -> list:
    """Configured transports plus --file/--stderr, minus stdout if --no-stdout."""
    config = loader.load()
    transports = loader.open_transports(config)
    try:
        if args.stderr:
            transports.append(create_transport("stderr"))
        for path in args.file:
            transports.append(create_transport("file", path=path))
    except OSError as e:
        for transport in transports:
            transport.close()
        raise ConfigError(f"cannot open transport: {e}") from e

    if args.no_stdout:
        transports = [
            t for t in transports
            if not (isinstance(t, StandardStreamTransport) and t.name == "stdout")
        ]
    return transports


def _list_transports(transports):
    console = get_console()
    if not transports:
        console.info("(no transports)")
    for transport in transports:
        kind = "interactive" if transport.is_interactive else "plain"
        extra = " (file)" if isinstance(transport, FileTransport) else ""
        console.info(f"{transport.name}\t{kind}{extra}")


def _iter_messages(args):
    if args.message:
        yield " ".join(args.message)
        return
    for line in sys.stdin:
        yield line


def _log_messages(logger: Logger, args) -> int:
    """Log each message with one trailing newline; return the exit code."""
    for message in _iter_messages(args):
        text = message.rstrip("\n") + "\n"
        try:
            logger.log_at(args.level, text, safe=args.safe)
        except FanlogError as e:
            get_logger().error(str(e))
            return 1
    return 0


if __name__ == "__main__":
    main()
