"""
Diff Generator Service - Line-by-line comparison of two query texts
"""

from __future__ import annotations

from models.diff import DiffKind, DiffLine, DiffStatistics


def split_lines(text: str) -> list[str]:
    """Split on line feeds only; carriage returns stay part of the line"""
    return text.split("\n")


class DiffGenerator:
    """Generate positional diffs for query comparisons"""

    def generate_diff(self, left_content: str, right_content: str) -> list[DiffLine]:
        """Compare line i of the left text against line i of the right text.

        Alignment never shifts: one line inserted at the top of either side
        turns every following position into a replace.
        """
        left_lines = split_lines(left_content)
        right_lines = split_lines(right_content)
        result = []

        for i in range(max(len(left_lines), len(right_lines))):
            left = left_lines[i] if i < len(left_lines) else None
            right = right_lines[i] if i < len(right_lines) else None

            if left is None:
                result.append(DiffLine(kind=DiffKind.INSERT, right_text=right, right_line_number=i + 1))
            elif right is None:
                result.append(DiffLine(kind=DiffKind.DELETE, left_text=left, left_line_number=i + 1))
            else:
                result.append(
                    DiffLine(
                        kind=DiffKind.EQUAL if left == right else DiffKind.REPLACE,
                        left_text=left,
                        right_text=right,
                        left_line_number=i + 1,
                        right_line_number=i + 1,
                    )
                )

        return result

    def statistics(self, lines: list[DiffLine]) -> DiffStatistics:
        """Count additions, deletions and unchanged positions"""
        counts = {kind: 0 for kind in DiffKind}
        for line in lines:
            counts[line.kind] += 1

        return DiffStatistics(
            additions=counts[DiffKind.INSERT] + counts[DiffKind.REPLACE],
            deletions=counts[DiffKind.DELETE] + counts[DiffKind.REPLACE],
            unchanged=counts[DiffKind.EQUAL],
        )

    def render_unified(self, lines: list[DiffLine]) -> str:
        """Render the unified view with +/- markers"""
        result_lines = []

        for line in lines:
            if line.kind == DiffKind.EQUAL:
                result_lines.append(f"  {line.left_text}")
                continue
            if line.left_text is not None:
                result_lines.append(f"- {line.left_text}")
            if line.right_text is not None:
                result_lines.append(f"+ {line.right_text}")

        return "\n".join(result_lines)

    def render_split(self, lines: list[DiffLine]) -> list[tuple[str, str]]:
        """Render the split view as (left, right) pairs"""
        return [(line.left_text or "", line.right_text or "") for line in lines]
