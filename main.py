import argparse
import logging

from asdbctl.app.backend import DisplayBackend
from asdbctl.app.config import ConfigManager
from asdbctl.errors import AsdbctlError
from asdbctl.logging_setup import configure_logging


def _percent(text: str) -> int:
    value = int(text)
    if not 0 <= value <= 100:
        raise argparse.ArgumentTypeError(f"{value} is not in 0..100")
    return value


def _step(text: str) -> int:
    value = int(text)
    if not 1 <= value <= 100:
        raise argparse.ArgumentTypeError(f"{value} is not in 1..100")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asdbctl",
        description="Tool to get or set the brightness for Apple Studio Displays",
    )
    # Defined at the root so it applies to any subcommand.
    parser.add_argument(
        "-s",
        "--serial",
        default=None,
        help="Serial number of the display for which to adjust the brightness.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Turn debugging information on (repeat for more).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Can also use ASDBCTL_LOG_LEVEL env var.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to the config file. Default: ~/.config/asdbctl/config.json or ASDBCTL_CONFIG.",
    )

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("get", help="Get the current brightness in %%")

    set_parser = sub.add_parser("set", help="Set the current brightness in %%")
    set_parser.add_argument("brightness", type=_percent, help="Brightness percentage (0-100).")

    up_parser = sub.add_parser("up", help="Increase the brightness")
    up_parser.add_argument("-s", "--step", type=_step, default=None, help="Step size in percent (1-100).")

    down_parser = sub.add_parser("down", help="Decrease the brightness")
    down_parser.add_argument("-s", "--step", type=_step, default=None, help="Step size in percent (1-100).")

    sub.add_parser("list", help="List connected Apple Studio Displays")
    sub.add_parser("gui", help="Launch the brightness slider window")
    return parser


def run_command(args: argparse.Namespace, config: ConfigManager, backend: DisplayBackend) -> int:
    logger = logging.getLogger("main")
    serial = args.serial if args.serial is not None else config.serial

    if args.command == "list":
        for display in backend.discover():
            print(
                f"{display.serial_number or '-'}\t"
                f"{display.product_string or '-'}\t"
                f"{display.path.decode(errors='replace')}"
            )
        return 0

    if args.command == "get":
        readings = backend.get(serial)
        for reading in readings:
            print(f"brightness {reading.percent}")
    elif args.command == "set":
        readings = backend.set(args.brightness, serial)
    elif args.command == "up":
        readings = backend.up(args.step or config.step, serial)
    elif args.command == "down":
        readings = backend.down(args.step or config.step, serial)
    else:
        raise ValueError(f"Unknown command: {args.command!r}")

    if not readings:
        logger.error("No display matched serial number %r", serial)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(cli_level=args.log_level, verbosity=args.verbose)
    logger = logging.getLogger("main")

    config = ConfigManager(args.config)

    # No subcommand launches the slider window.
    if args.command in (None, "gui"):
        import ui_main

        serial = args.serial if args.serial is not None else config.serial
        return ui_main.run_gui(config, serial=serial)

    try:
        return run_command(args, config, DisplayBackend())
    except AsdbctlError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
