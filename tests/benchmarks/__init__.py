"""Benchmarks package — uses pytest-benchmark.

Run with::

    pytest tests/benchmarks/bench_encoder.py -v
    pytest tests/benchmarks/bench_encoder.py -v --benchmark-sort=median

To run as plain functional tests without benchmark overhead::

    pytest tests/benchmarks/bench_encoder.py --benchmark-disable
"""
