"""Ranked comparison of benchmark results (Python reporting layer).

This package takes already-computed benchmark results, either throughput
(iterations per second) or elapsed time (seconds), orders them fastest first
and prints a plain-text report of how much slower each result is than the
fastest one.
"""
