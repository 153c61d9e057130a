#!/usr/bin/env python3
"""
Locate repeated-label groups in an HTML page

Demonstrates:
- Reading markup into a Node tree with HtmlReader
- Ranking candidate groups with GroupLocator
- Restricting the search to a sub-tree with a scope predicate
- Reading the rows of the best group through the result view
"""

import sys
from pathlib import Path

from tabloc import GroupLocator, HtmlReader, within


SAMPLE_HTML = """
<html>
  <body>
    <nav><a>Home</a><a>Rates</a><a>Contact</a></nav>
    <main>
      <table>
        <tr><td>Fixed 30-Year</td><td>6.125%</td></tr>
        <tr><td>Fixed 15-Year</td><td>5.750%</td></tr>
        <tr><td>5/1 ARM</td><td>5.875%</td></tr>
        <tr><td>7/1 ARM</td><td>6.000%</td></tr>
      </table>
    </main>
  </body>
</html>
"""


def main():
    reader = HtmlReader()
    if len(sys.argv) > 1:
        root = reader.read(Path(sys.argv[1]), root="body")
    else:
        root = reader.read_string(SAMPLE_HTML, root="body")

    print("=" * 70)
    print("Ranked groups")
    print("=" * 70)

    locator = GroupLocator(top_k=5)
    result = locator.locate(root)
    if result.is_empty:
        print("No structured group found")
        return

    for rank, candidate in enumerate(result):
        print(
            f"  #{rank} <{candidate.label}> "
            f"{candidate.dominant_count}x <{candidate.dominant_label}> "
            f"(homogeneity {candidate.homogeneity:.0%})"
        )
    print()

    print("=" * 70)
    print("Rows of the best group under <main>")
    print("=" * 70)

    scoped = locator.locate(root, scope=within("main", inclusive=False))
    for row in scoped.children(0):
        print("  " + " | ".join(cell.text for cell in row.children))


if __name__ == "__main__":
    main()
