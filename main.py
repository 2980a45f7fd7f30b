"""主程序入口 - 后缀表达式求值（单条 / 文件批量 / 演示用例）"""
import argparse
import logging
import os
import sys

from config.config import *
from core import RPNEvaluator
from data.expression_loader import (
    LineRecord,
    evaluate_file,
    evaluate_text,
    records_to_frame
)
from utils.metrics import summarize_results, success_rate

logger = logging.getLogger(__name__)


def run_samples(evaluator=RPNEvaluator, out=None):
    """依次运行内置演示用例，输出标题、表达式和结果/错误"""
    out = out if out is not None else sys.stdout
    results = []
    for title, expression in SAMPLE_EXPRESSIONS:
        print(f"\n{title}", file=out)
        print(f"Expression: {expression}", file=out)
        result = evaluator.evaluate(expression)
        if result.ok:
            print(f"Result: {result.value}", file=out)
        else:
            print(f"Error: {result.message}", file=out)
        results.append(result)
    return results


def evaluate_single(expression, evaluator=RPNEvaluator, out=None):
    """求值一条表达式并打印"""
    out = out if out is not None else sys.stdout
    result = evaluator.evaluate(expression)
    if result.ok:
        print(f"Result: {result.value}", file=out)
    else:
        print(f"Error: {result.message}", file=out)
    return LineRecord(1, expression, result)


def save_results(records, results_path):
    """把批量结果保存为CSV，并记录统计信息"""
    frame = records_to_frame(records)
    summary = summarize_results(frame)
    logger.info(f"Saving {summary['total']} results to {results_path}")
    logger.info(f"Succeeded: {summary['succeeded']}, Failed: {summary['failed']} "
                f"(success rate {success_rate(summary):.2%})")
    frame.to_csv(results_path, index=False)
    return summary


def main(args, out=None, err=None):
    """
    Returns:
        进程退出码：单条表达式求值失败时为1，其余为0
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    encoding = BATCH_CONFIG['encoding']
    exit_code = 0
    records = []

    if args.expression is not None:
        logger.info("=== Evaluating single expression ===")
        record = evaluate_single(args.expression, out=out)
        records.append(record)
        if not record.result.ok:
            exit_code = 1

    if args.text is not None:
        logger.info("=== Evaluating expressions from text ===")
        records.extend(evaluate_text(args.text, out=out))

    run_demo = args.demo or (args.expression is None and args.text is None and not args.input_path)
    if run_demo:
        logger.info("=== Running sample expressions ===")
        run_samples(out=out)

    if run_demo or args.input_path:
        logger.info("=== Evaluating expressions from file ===")
        file_path = args.input_path or BATCH_CONFIG['default_input_path']
        if run_demo:
            print("\nReading expressions from file test:", file=out)
            print(f"Testing file at: {os.path.abspath(file_path)}", file=out)
        records.extend(evaluate_file(file_path, out=out, err=err, encoding=encoding))

    if args.save_results:
        if records:
            save_results(records, args.results_path)
        else:
            logger.warning("No results to save")

    return exit_code


def build_parser():
    parser = argparse.ArgumentParser(description="Postfix (RPN) integer calculator")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Evaluate a single postfix expression"
    )
    parser.add_argument(
        "--text",
        type=str,
        default=None,
        help="Evaluate newline-separated postfix expressions given as one string"
    )
    parser.add_argument(
        "--input_path",
        type=str,
        default=None,
        help="Path to a text file with one postfix expression per line"
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run the built-in sample expressions and the default expressions file"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save the evaluation results to a CSV file"
    )
    parser.add_argument(
        "--results_path",
        type=str,
        default=BATCH_CONFIG['results_path'],
        help="Path to save the evaluation results"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level"
    )
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG['format']
    )
    validate_config()
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
