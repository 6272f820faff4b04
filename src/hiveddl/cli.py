import argparse
import sys

from hiveddl.execution.config_executor import ConfigExecutor
from hiveddl.utils.exceptions import HiveDDLError


class C:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"


def cprint(text: str, color: str = C.RESET, bold: bool = False, file=None):
    prefix = (C.BOLD if bold else "") + color
    print(f"{prefix}{text}{C.RESET}", file=file or sys.stdout)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hive table definition writer")
    parser.add_argument("--config", required=True, help="Path to YAML table config")
    parser.add_argument("--output-dir", help="Directory for the generated .hql script")
    parser.add_argument(
        "--print",
        dest="print_statements",
        action="store_true",
        help="Also print the generated statements",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        executor = ConfigExecutor(args.config, output_dir=args.output_dir)
        result = executor.execute()
    except (HiveDDLError, FileNotFoundError) as e:
        cprint("[FAILED] Table definition generation failed.", C.RED, bold=True, file=sys.stderr)
        cprint(str(e), C.RED, file=sys.stderr)
        return 1

    if args.print_statements:
        print(result["create_table"])
        print(result["load_data"])

    cprint(f"[DONE] Script written to: {result['script_path']}", C.GREEN, bold=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
