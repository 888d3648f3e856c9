"""
SMS Sender - Main Entry Point.

Reads a message body from stdin, optionally shortens a URL and appends it,
trims the text to a single 160-character segment and sends it through the
Twilio Messages API.

Usage:
    # Send a message
    echo "Build finished" | python -m sendsms -from +15550001 -to +15550002 -sid AC123 -token secret

    # Append a shortened link
    echo "Report ready" | python -m sendsms -url https://example.com/reports/42 \\
        -shortener "https://is.gd/create.php?format=simple&url=%s"

    # Compose only, print the text that would be sent
    echo "Hello" | python -m sendsms --dry-run

Environment Variables:
    SMS_FROM: Sender phone number
    SMS_TO: Recipient phone number
    SMS_ACCOUNTSID: Twilio Account SID
    SMS_AUTHTOKEN: Twilio Auth Token
    SMS_SHORTENER: URL shortener endpoint containing %s (required with SMS_URL)
    SMS_URL: URL to shorten and send
    SMS_API_URL: Messages endpoint template containing {account_sid} (optional)
    SMS_TIMEOUT: Request timeout in seconds (optional, default: none)
"""

import sys
import argparse
from typing import List, Mapping, Optional, TextIO

from loguru import logger

from sendsms.config import ENV_VARS, FLAGS, load_env_file, resolve_config
from sendsms.domain.interfaces import (
    APIError,
    ConfigurationError,
    InputError,
    ShorteningError,
)
from sendsms.pipeline import PipelineFactory


HELP_TEXT = {
    "from_address": "from phone number",
    "to_address": "to phone number",
    "account_sid": "Twilio Account SID",
    "auth_token": "Twilio Auth Token",
    "shortener_template": "URL shortener endpoint. Should contain %%s where URL will be passed",
    "long_url": "URL to shorten and send",
    "api_url": "Messages endpoint. Should contain {account_sid}",
    "timeout": "request timeout in seconds",
}


def configure_logging(verbose: bool = False) -> None:
    """
    Configure loguru logger.

    Args:
        verbose: If True, set DEBUG level, otherwise INFO
    """
    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level="DEBUG" if verbose else "INFO",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="send-sms",
        description=(
            "send-sms sends an SMS message using the Twilio API. Parameters can be set "
            "using flags or environment variables, and the message body should be passed to stdin."
        ),
        allow_abbrev=False,
    )

    for field, flag in FLAGS.items():
        parser.add_argument(
            flag,
            "-" + flag,
            dest=field,
            metavar=field.split("_")[-1].upper(),
            help=f"{HELP_TEXT[field]} ({ENV_VARS[field]})",
        )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Compose the message and print it, don't send it",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose debug logging",
    )

    return parser


def read_body(stream: TextIO) -> str:
    """
    Read the whole message body.

    When the stream exposes its raw bytes they are decoded as UTF-8, with
    invalid sequences replaced by U+FFFD.

    Args:
        stream: Text stream to read to the end

    Returns:
        Message body

    Raises:
        InputError: If the stream cannot be read or decoded
    """
    try:
        buffer = getattr(stream, "buffer", None)
        if buffer is not None:
            return buffer.read().decode("utf-8", errors="replace")
        return stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Unable to read from stdin: {e}") from e


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """
    Main entry point for the SMS sender.

    Args:
        argv: Command line arguments (default: sys.argv[1:])
        stdin: Message body stream (default: sys.stdin)
        environ: Environment mapping (default: os.environ after loading .env)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)

    if environ is None:
        load_env_file()

    try:
        config = resolve_config(vars(args), environ)
    except ConfigurationError as e:
        parser.print_help()
        logger.error(f"Configuration error: {e}")
        return 1

    logger.debug(f"Configuration: {config!r}")

    try:
        body = read_body(stdin if stdin is not None else sys.stdin)

        pipeline = PipelineFactory.create_default(config)
        result = pipeline.run_config(body, config, dry_run=args.dry_run)

        if result.dry_run:
            print(result.message.body)
        else:
            logger.success(f"SMS sent to {config.to_address}")
        return 0

    except InputError as e:
        logger.error(str(e))
        return 1
    except ShorteningError as e:
        logger.error(f"Unable to get shortened URL: {e}")
        return 1
    except APIError as e:
        logger.error(f"Unable to send SMS: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
