"""主程序入口 - 输入函数，输出RPN，并对给定区间积分"""
import argparse
import logging
import sys

from config.config import INTEGRATION_CONFIG, DISPLAY_CONFIG, STEPPING_MODES, validate_config
from core import MalformedTokenError, InvalidIntegrationError
from calculator import Calculator
from utils import sample_function, reference_integral, relative_difference

logger = logging.getLogger(__name__)


def format_result(value, precision=None):
    precision = precision or DISPLAY_CONFIG["precision"]
    return f"{value:.{precision}g}"


def parse_range(line):
    """解析 "a b" 形式的积分区间，失败时抛出 ValueError"""
    parts = line.replace(',', ' ').split()
    if len(parts) != 2:
        raise ValueError(f"Expected two numbers, got {len(parts)}: '{line.strip()}'")
    return float(parts[0]), float(parts[1])


def iter_ranges(args, input_func):
    """命令行给出区间时直接使用，否则交互式循环读取直到EOF或空行"""
    if args.range:
        for a, b in args.range:
            yield a, b
        return

    while True:
        try:
            line = input_func(DISPLAY_CONFIG["range_prompt"])
        except EOFError:
            break
        if not line.strip():
            break
        try:
            yield parse_range(line)
        except ValueError as e:
            logger.error(f"Invalid range: {e}")


def report_integral(calculator, rpn, a, b, args):
    result = calculator.calculate_integral(rpn, a, b, args.steps)
    print(f"The integral is: {format_result(result)}")

    if args.table:
        table = sample_function(rpn, a, b, args.table) if a < b else None
        if table is not None:
            print(table.to_string())
        else:
            logger.warning(f"Skipping table for empty interval [{a}, {b}]")

    if args.check:
        reference = reference_integral(rpn, a, b, args.steps)
        logger.info(f"Reference (scipy trapezoid): {format_result(reference)}, "
                    f"relative difference: {relative_difference(result, reference):.3e}")
    return result


def main(args, input_func=input):
    validate_config()
    calculator = Calculator(stepping=args.stepping)

    expression = args.expression
    if expression is None:
        try:
            expression = input_func(DISPLAY_CONFIG["function_prompt"])
        except EOFError:
            logger.error("No function given")
            return 2

    try:
        rpn = calculator.convert_to_rpn(expression)
    except MalformedTokenError as e:
        logger.error(f"Cannot parse function '{expression}': {e}")
        return 2

    calculator.print_rpn(rpn)

    for a, b in iter_ranges(args, input_func):
        try:
            report_integral(calculator, rpn, a, b, args)
        except InvalidIntegrationError as e:
            logger.error(f"Integration failed: {e}")

    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="RPN Function Integrator")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Function of x in infix form, tokens separated by spaces (e.g. 'x ^ 2 + 3 * x')"
    )
    parser.add_argument(
        "--range",
        type=float,
        nargs=2,
        action="append",
        metavar=("START", "END"),
        help="Integration range, may be repeated; prompts interactively when omitted"
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=INTEGRATION_CONFIG["num_steps"],
        help="Number of trapezoid subintervals (default: 1000)"
    )
    parser.add_argument(
        "--stepping",
        choices=STEPPING_MODES,
        default=INTEGRATION_CONFIG["stepping"],
        help="accumulate: x += h like the classic loop; indexed: x = a + i*h"
    )
    parser.add_argument(
        "--table",
        type=int,
        default=0,
        help="Also print the function sampled at this many points"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Compare against scipy's trapezoid on the same grid"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    args = parser.parse_args(argv)
    if args.table and args.table < 2:
        parser.error("--table needs at least 2 points")
    return args


def cli():
    args = parse_args()
    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
