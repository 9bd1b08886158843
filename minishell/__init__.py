"""Building blocks of a small shell: text helpers, line reading, printf formatting, environment, builtins and pipeline execution."""

__version__ = "0.1.0"