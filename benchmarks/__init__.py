"""
Benchmark suite for nparser scanning and parsing performance.

Compares the character-at-a-time parser against standard JSON libraries:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parsing speed and memory usage across different document shapes.
"""
