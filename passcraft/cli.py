"""CLI for passcraft: generate, score, templates."""

import argparse
import logging
from dataclasses import replace
from typing import List, Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .generator import PasswordConfig, InvalidConfigError, generate
from .evaluator import LABELS, estimate
from .templates import TEMPLATES, UnknownTemplateError, get_template
from .config import LOG_LEVELS, MAX_COPIES, load_config, config_from_settings

logger = logging.getLogger(__name__)

console = Console(emoji=False)

EXIT_OK = 0
EXIT_USAGE = 2

_LABEL_STYLES = {
    LABELS[0]: "dim",
    LABELS[1]: "red",
    LABELS[2]: "yellow",
    LABELS[3]: "green",
    LABELS[4]: "bold green",
}

def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1 or n > MAX_COPIES:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_COPIES}")
    return n

def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )

def _strength_line(password: str) -> str:
    result = estimate(password)
    style = _LABEL_STYLES.get(result.label, "")
    bar = "#" * result.score + "-" * (4 - result.score)
    return f"[{style}]{escape(result.label)}[/{style}] {escape(f'[{bar}]')} {result.score}/4"

def resolve_config(args: argparse.Namespace, settings: dict) -> PasswordConfig:
    """
    Settings give the starting config, a template replaces it wholesale,
    then explicit flags are applied on top.
    """
    if args.template:
        cfg = get_template(args.template).config
    else:
        cfg = config_from_settings(settings)
    if args.length is not None:
        cfg = replace(cfg, length=args.length)
    if args.no_upper:
        cfg = replace(cfg, use_uppercase=False)
    if args.no_lower:
        cfg = replace(cfg, use_lowercase=False)
    if args.no_digits:
        cfg = replace(cfg, use_digits=False)
    if args.no_symbols:
        cfg = replace(cfg, use_symbols=False)
    return cfg

def cmd_generate(args, settings) -> int:
    cfg = resolve_config(args, settings)
    copies = args.copies if args.copies is not None else settings["copies"]
    logger.info("generating %d password(s) of length %d", copies, cfg.length)

    passwords: List[str] = [generate(cfg) for _ in range(copies)]
    for i, pw in enumerate(passwords):
        prefix = f"[bold green]Password #{i+1}:[/bold green] " if len(passwords) > 1 else ""
        console.print(f"{prefix}{escape(pw)}", soft_wrap=True)
        if args.show_strength:
            console.print(f"  Strength: {_strength_line(pw)}", soft_wrap=True)
    return EXIT_OK

def cmd_score(args, settings) -> int:
    pw = args.password
    result = estimate(pw)
    header = f"Strength: {escape(result.label)}"
    body = (
        f"Score: {result.score} / 4\n"
        f"Raw points: {result.points:.1f}\n"
        f"Length: {len(pw)}"
    )
    console.print(Panel(body, title=header))
    return EXIT_OK

def cmd_templates(args, settings) -> int:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Key")
    table.add_column("Name")
    table.add_column("Length", justify="right")
    table.add_column("Classes")
    table.add_column("Description")
    for key, tpl in TEMPLATES.items():
        classes = ", ".join(c.value for c in tpl.config.enabled_classes())
        table.add_row(key, tpl.name, str(tpl.config.length), classes, tpl.description)
    console.print(table)
    return EXIT_OK

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passcraft")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Logging verbosity (defaults to the settings file)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--template", "-t", type=str, help="Start from a named template (see 'templates')")
    gen.add_argument("--length", type=int, default=None, help="Password length (8-128)")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--copies", type=_positive_int, default=None, help="How many passwords to generate")
    gen.add_argument("--show-strength", action="store_true", help="Print the strength of each password")
    gen.set_defaults(func=cmd_generate)

    sc = sub.add_parser("score", help="Estimate the strength of a password")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.set_defaults(func=cmd_score)

    tp = sub.add_parser("templates", help="List the built-in templates")
    tp.set_defaults(func=cmd_templates)

    return parser

def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # logging first so warnings about the settings file reach the handler
    _setup_logging(args.log_level or "WARNING")
    settings = load_config()
    logging.getLogger().setLevel(args.log_level or settings["log_level"].upper())

    try:
        return args.func(args, settings)
    except (InvalidConfigError, UnknownTemplateError) as e:
        logger.debug("rejected request: %r", e)
        console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        return EXIT_USAGE

if __name__ == "__main__":
    raise SystemExit(main())
