"""工具模块"""
from .metrics import summarize_results, success_rate

__all__ = ['summarize_results', 'success_rate']
