"""utils/metrics.py"""
import pandas as pd

from core import ErrorKind


def summarize_results(frame):
    """
    统计一批求值结果
    Args:
        frame: records_to_frame 生成的DataFrame
    Returns:
        dict: total / succeeded / failed，以及每种错误类型的数量
    """
    total = len(frame)
    succeeded = int(frame['ok'].sum()) if total else 0
    counts = frame['error_kind'].dropna().value_counts() if total else pd.Series(dtype=int)

    summary = {
        'total': total,
        'succeeded': succeeded,
        'failed': total - succeeded,
    }
    # 没出现的错误类型也记为0，保证键固定
    for kind in ErrorKind:
        summary[kind.value] = int(counts.get(kind.value, 0))
    return summary


def success_rate(summary):
    if summary['total'] == 0:
        return 0.0
    return summary['succeeded'] / summary['total']
