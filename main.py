"""主程序入口 - 命令行求值、交互式会话或启动HTTP服务"""
import argparse
import logging
import sys

from config.config import SERVER_CONFIG, LOGGING_CONFIG, validate_config
from core import calculate, format_result
from session import CalculatorSession

logger = logging.getLogger(__name__)

MEMORY_COMMANDS = {
    ':mc': 'mem_clear',
    ':mr': 'mem_recall',
    ':m+': 'mem_plus',
}


def setup_logging(level):
    # 设置日志
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOGGING_CONFIG["format"]
    )


def evaluate_all(expressions, out=sys.stdout):
    """逐个求值并打印 `expr = result`"""
    for expr in expressions:
        out.write(f"{expr} = {calculate(expr)}\n")


def run_interactive(session=None, stdin=sys.stdin, out=sys.stdout):
    """
    简单的行式交互循环。

    :q 退出，:tape 打印历史，:mc/:mr/:m+ 为记忆键，
    其他输入交给会话求值（:mr 之后输入空行即可计算召回的值）。
    """
    session = session or CalculatorSession()
    out.write("Calculator ready. Type an expression, :tape, :mc, :mr, :m+ or :q\n")

    for raw in stdin:
        line = raw.strip()
        if line == ':q':
            break
        if line == ':tape':
            for entry in session.tape:
                out.write(f"  {entry.expr} = {entry.result}\n")
            continue
        if line in MEMORY_COMMANDS:
            getattr(session, MEMORY_COMMANDS[line])()
            out.write(f"  M = {format_result(session.memory)}\n")
            continue

        session.expression += line
        result = session.equals()
        if result is not None:
            out.write(f"{result}\n")

    return session


def main(args):
    validate_config()

    if args.serve:
        # 延迟导入：只在需要时加载 fastapi/uvicorn
        from server import run_server
        run_server(host=args.host, port=args.port)
        return

    if args.expr:
        evaluate_all(args.expr)
        return

    run_interactive()


def build_parser():
    parser = argparse.ArgumentParser(description="Safe arithmetic calculator")

    parser.add_argument(
        "--expr",
        type=str,
        action="append",
        help="Expression to evaluate (repeatable)"
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the HTTP API server"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=SERVER_CONFIG["host"],
        help="Host to bind when serving"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=SERVER_CONFIG["port"],
        help="Port to bind when serving"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: INFO)"
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()
    setup_logging(args.log_level)
    main(args)
