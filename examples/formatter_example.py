"""Example of using the RecordFormatter directly, without stdlib logging.

Run with:
    python examples/formatter_example.py
"""

import sys

from loglink import (
    FormatterConfig,
    RecordFormatter,
    info,
    resolve_hostname,
    start_transaction,
)

formatter = RecordFormatter(
    config=FormatterConfig(pretty=True),
    resolve_hostname=resolve_hostname,
)

if __name__ == "__main__":
    entry = info("Hello World!", zip="zap", items=[1, 2, 3], ratio=42.0)

    # The same entry formatted under two contexts yields two independent records
    formatter.write(entry, sys.stdout.buffer)
    formatter.write(entry, sys.stdout.buffer, context=start_transaction("ExampleApp"))
