"""工具模块"""
from .formatting import render_postfix, render_token, banner_lines

__all__ = ['render_postfix', 'render_token', 'banner_lines']
