"""Competitive-programming problem solutions as plain Python functions, with a small command line."""

__version__ = "0.1.0"
__all__ = ["cses", "codeforces", "icpc", "leetcode", "cli"]