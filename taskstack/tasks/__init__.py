"""Arithmetic tasks for the scheduler: add, mul, exp and fib."""

__all__ = ["add", "exp", "fib", "mul"]