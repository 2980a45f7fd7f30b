"""表达式加载和批量求值模块"""
import io
import logging
import sys

import pandas as pd

from core import RPNEvaluator

logger = logging.getLogger(__name__)

RECORD_COLUMNS = ['line_number', 'expression', 'ok', 'value', 'error_kind', 'message']


class LineRecord:
    """一行表达式的求值记录"""

    def __init__(self, line_number, expression, result):
        self.line_number = line_number  # 从1开始
        self.expression = expression
        self.result = result

    def __repr__(self):
        return f"LineRecord({self.line_number}, {self.expression!r}, {self.result!r})"


def read_expression_lines(file_path, encoding='utf-8'):
    """
    逐行读取表达式文件（去掉行尾换行符）
    无法解码的字节替换为U+FFFD，这一行随后按非法token报告

    Parameters:
    - file_path: 文本文件路径，每行一个后缀表达式
    - encoding: 文件编码

    Raises:
    - OSError: 文件不存在或不可读
    """
    with open(file_path, 'r', encoding=encoding, errors='replace') as f:
        for line in f:
            yield line.rstrip('\r\n')


def split_expression_text(text):
    """把多行字符串拆成表达式行，换行规则与读文件一致"""
    return [line.rstrip('\r\n') for line in io.StringIO(text, newline=None)]


def evaluate_lines(lines, evaluator=RPNEvaluator, on_record=None):
    """
    每行调用一次evaluate，不重试；单行失败不会中断整批

    Parameters:
    - lines: 表达式行的可迭代对象（可以是惰性读取的文件）
    - on_record: 每得到一条记录就回调一次，用于边算边输出

    Returns:
    - LineRecord列表，行号从1开始连续递增
    """
    records = []
    for line_number, line in enumerate(lines, 1):
        record = LineRecord(line_number, line, evaluator.evaluate(line))
        records.append(record)
        if on_record is not None:
            on_record(record)
    failed = sum(1 for r in records if not r.result.ok)
    logger.info(f"Evaluated {len(records)} expressions, {failed} failed")
    return records


def format_record(record):
    """渲染一条记录的输出文本"""
    lines = [f"Expression {record.line_number}: {record.expression}"]
    if record.result.ok:
        lines.append(f"Result {record.line_number}: {record.result.value}")
    else:
        lines.append(f"Error in expression {record.line_number}: {record.result.message}")
    return lines


def _printer(out):
    def print_record(record):
        for text in format_record(record):
            print(text, file=out)
    return print_record


def evaluate_text(text, evaluator=RPNEvaluator, out=None):
    """对多行字符串逐行求值并输出"""
    out = out if out is not None else sys.stdout
    return evaluate_lines(split_expression_text(text), evaluator, on_record=_printer(out))


def evaluate_file(file_path, evaluator=RPNEvaluator, out=None, err=None, encoding='utf-8'):
    """
    读取文件并逐行输出求值结果
    文件读取失败只报告到错误通道，不向上抛出

    Returns:
    - LineRecord列表（读取失败时为空列表）
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    logger.info(f"Loading expressions from {file_path}")

    try:
        records = evaluate_lines(read_expression_lines(file_path, encoding), evaluator,
                                 on_record=_printer(out))
    except (OSError, LookupError) as e:
        logger.error(f"Error reading file {file_path}: {e}")
        print(f"Error reading file: {e}", file=err)
        return []

    logger.info(f"Processed {len(records)} lines from {file_path}")
    return records


def records_to_frame(records):
    """把记录转换为DataFrame，便于保存和统计"""
    rows = []
    for record in records:
        result = record.result
        rows.append({
            'line_number': record.line_number,
            'expression': record.expression,
            'ok': result.ok,
            'value': result.value,
            'error_kind': result.error_kind.value if result.error_kind is not None else None,
            'message': result.message,
        })
    frame = pd.DataFrame(rows, columns=RECORD_COLUMNS)
    # 有失败行时value列会含None，用可空整数类型保持整数
    frame['value'] = frame['value'].astype('Int64')
    return frame
