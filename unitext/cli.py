# cli.py

import argparse
from typing import List, Optional

from .errors import UnitextError
from .interface import Interface
from .script import ScriptOptions, StyleAxis

AXIS_FLAGS = {
    StyleAxis.BOLD: ('-b', '--bold'),
    StyleAxis.ITALIC: ('-i', '--italic'),
    StyleAxis.FRAKTUR: ('--fraktur',),
    StyleAxis.SCRIPT: ('--script',),
    StyleAxis.DOUBLE_STRUCK: ('--double-struck',),
    StyleAxis.SANS_SERIF: ('--sans-serif',),
    StyleAxis.MONOSPACE: ('--monospace',),
    StyleAxis.REGIONAL_INDICATOR: ('--regional-indicator',),
}

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='unitext',
        description='Inspect and restyle Unicode text')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')
    commands = parser.add_subparsers(dest='command', required=True)

    script = commands.add_parser('script',
        help='Convert Latin letters to styled mathematical variants')
    for axis, flags in AXIS_FLAGS.items():
        script.add_argument(*flags, dest='axes', action='append_const', const=axis,
            help=f'Apply the {axis.value} style')
    script.add_argument('-s', '--style', action='append', default=[],
        help='Style name(s), e.g. "bold+italic"; may be repeated')
    script.add_argument('--strict', action='store_true',
        help='Fail on letters outside Basic Latin instead of leaving them alone')
    script.add_argument('--interactive', action='store_true',
        help='Read lines from an interactive prompt')
    script.add_argument('-f', '--file', dest='files', action='append', default=[],
        help='Read input from FILE; may be repeated')
    script.add_argument('text', nargs='*',
        help='Literal text to convert (default: read stdin)')

    name = commands.add_parser('name', help='Find characters whose name matches a pattern')
    name.add_argument('pattern', help='Regular expression, matched case-insensitively')
    name.add_argument('-n', '--limit', type=int, help='Stop after N matches')

    char = commands.add_parser('char', help='Show the character with an exact name')
    char.add_argument('name', nargs='+')

    commands.add_parser('categories', help='List General Category values')
    commands.add_parser('blocks', help='List Unicode blocks')
    commands.add_parser('scripts', help='List Unicode scripts')

    block = commands.add_parser('block', help='List the characters of a block')
    block.add_argument('name', nargs='+')

    category = commands.add_parser('category', help='List the characters of a category')
    category.add_argument('name', help='Category such as Lu, or major class such as L')

    return parser

def run(args: argparse.Namespace, interface: Interface) -> None:
    if args.command == 'script':
        options = ScriptOptions(axes=frozenset(args.axes or ()), strict=args.strict)
        interface.convert(options, names=args.style, texts=args.text,
                          files=args.files, interactive=args.interactive)
    elif args.command == 'name':
        interface.search(args.pattern, args.limit)
    elif args.command == 'char':
        interface.describe(' '.join(args.name))
    elif args.command == 'categories':
        interface.categories()
    elif args.command == 'blocks':
        interface.blocks()
    elif args.command == 'scripts':
        interface.scripts()
    elif args.command == 'block':
        interface.block(' '.join(args.name))
    elif args.command == 'category':
        interface.category(args.name)

def main(argv: Optional[List[str]] = None, interface: Optional[Interface] = None) -> int:
    args = build_parser().parse_args(argv)
    interface = interface or Interface(
        logging_enabled=args.enable_logging,
        log_file=args.log_file
    )
    try:
        run(args, interface)
    except UnitextError as e:
        interface.logger.error(f"{type(e).__name__}: {e}")
        interface.display.output.error(str(e))
        return 1
    except OSError as e:
        interface.display.output.error(str(e))
        return 1
    except KeyboardInterrupt:
        return 130
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
