#
# Logging setup shared by the xnex command line tools
#
# Rotating file logs, SMTP error mails, and --debug/--verbose flags.
#

from __future__ import annotations

import getpass
import logging
import logging.handlers
import socket
from argparse import ArgumentParser, Namespace

DEFAULT_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


def add_args(parser: ArgumentParser) -> None:
    """Add logger-related command line arguments."""
    grp = parser.add_argument_group("Logger Related Options")
    grp.add_argument("--logfile", type=str, metavar="filename", help="Name of logfile")
    grp.add_argument(
        "--log-bytes",
        type=int,
        default=10000000,
        metavar="length",
        help="Maximum logfile size in bytes",
    )
    grp.add_argument(
        "--log-count",
        type=int,
        default=3,
        metavar="count",
        help="Number of backup files to keep",
    )
    grp.add_argument(
        "--mail-to",
        action="append",
        metavar="foo@bar.com",
        help="Where to mail errors and exceptions to",
    )
    grp.add_argument(
        "--mail-from", type=str, metavar="foo@bar.com", help="Who the mail originates from"
    )
    grp.add_argument("--mail-subject", type=str, metavar="subject", help="Mail subject line")
    grp.add_argument(
        "--smtp-host",
        type=str,
        default="localhost",
        metavar="foo.bar.com",
        help="SMTP server to mail to",
    )
    gg = grp.add_mutually_exclusive_group()
    gg.add_argument("--debug", action="store_true", help="Enable very verbose logging")
    gg.add_argument("--verbose", action="store_true", help="Enable verbose logging")


def _log_level(args: Namespace, default: str) -> int | str:
    if args.debug:
        return logging.DEBUG
    if args.verbose:
        return logging.INFO
    return default


def _mail_handler(args: Namespace, formatter: logging.Formatter) -> logging.Handler:
    host = socket.getfqdn()
    frm = args.mail_from if args.mail_from is not None else f"{getpass.getuser()}@{host}"
    subj = args.mail_subject if args.mail_subject is not None else f"xnex error on {host}"
    handler = logging.handlers.SMTPHandler(args.smtp_host, frm, args.mail_to, subj)
    handler.setLevel(logging.ERROR)
    handler.setFormatter(formatter)
    return handler


def mk_logger(
    args: Namespace,
    fmt: str | None = None,
    name: str | None = None,
    log_level: str = "WARNING",
) -> logging.Logger:
    """Configure the ``name`` logger (root by default) from parsed arguments."""
    logger = logging.getLogger(name)
    logger.handlers.clear()

    ch: logging.Handler
    if args.logfile:
        ch = logging.handlers.RotatingFileHandler(
            args.logfile,
            maxBytes=args.log_bytes,
            backupCount=args.log_count,
        )
    else:
        ch = logging.StreamHandler()

    level = _log_level(args, log_level)
    logger.setLevel(level)
    ch.setLevel(level)

    formatter = logging.Formatter(fmt or DEFAULT_FORMAT)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    if args.mail_to is not None:
        logger.addHandler(_mail_handler(args, formatter))

    return logger
