import argparse
import json
import logging
import os
import sys

from dotenv import find_dotenv, load_dotenv

from switch_table import config_defaults
from switch_table.table import ArgumentTable


logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="switch_table",
        description="Show how a command line splits into switches and arguments.",
        epilog="Example: python -m switch_table --format json -- -p1 text1 text2 -opt1 -55 -opt2",
    )
    parser.add_argument(
        "--duplicates",
        choices=config_defaults.DUPLICATE_POLICIES,
        default=None,
        help="How repeated switches are recorded (default: $%s or %s)."
        % (config_defaults.ENV_DUPLICATES, config_defaults.DEFAULT_DUPLICATE_POLICY),
    )
    parser.add_argument(
        "--format",
        choices=config_defaults.OUTPUT_FORMATS,
        default=config_defaults.DEFAULT_OUTPUT_FORMAT,
        help="Output format.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $%s or %s)."
        % (config_defaults.ENV_LOG_LEVEL, config_defaults.DEFAULT_LOG_LEVEL),
    )
    parser.add_argument(
        "tokens",
        nargs="*",
        help="Tokens to split; put them after '--' so switches are not read as options.",
    )
    return parser


def _setup_logging(level_name):
    level = getattr(logging, str(level_name).upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=config_defaults.LOG_FORMAT, stream=sys.stderr)


def _resolve_duplicates(cli_value):
    if cli_value:
        return cli_value
    env_value = os.environ.get(config_defaults.ENV_DUPLICATES)
    if env_value:
        env_value = env_value.strip().lower()
        if env_value in config_defaults.DUPLICATE_POLICIES:
            return env_value
        logger.warning(
            "Ignoring %s=%r (expected one of: %s)",
            config_defaults.ENV_DUPLICATES,
            env_value,
            ", ".join(config_defaults.DUPLICATE_POLICIES),
        )
    return config_defaults.DEFAULT_DUPLICATE_POLICY


def format_text(table):
    lines = []
    for switch, args in table.to_dict().items():
        lines.append("%s\t%d\t%s" % (switch, len(args), " ".join(args)))
    return "\n".join(lines)


def format_json(table):
    payload = {
        "switch_count": table.switch_count,
        "duplicates": table.duplicates,
        "switches": table.to_dict(),
    }
    return json.dumps(payload, indent=2)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    # Environment values from ./.env never override ones already set.
    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path)

    args = build_parser().parse_args(argv)
    _setup_logging(args.log_level or os.environ.get(config_defaults.ENV_LOG_LEVEL) or config_defaults.DEFAULT_LOG_LEVEL)

    table = ArgumentTable(duplicates=_resolve_duplicates(args.duplicates))
    count = table.parse(args.tokens)

    if args.format == "json":
        out = format_json(table)
    else:
        out = format_text(table)
    if out:
        sys.stdout.write(out + "\n")

    if count < 1:
        logger.info("No switches found in %d tokens", len(args.tokens))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
