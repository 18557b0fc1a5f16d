from bluecanary.utils.quantity import parse_cpu, parse_memory

__all__ = ["parse_cpu", "parse_memory"]
