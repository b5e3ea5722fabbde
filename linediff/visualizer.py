import html
from itertools import zip_longest
from typing import List, Optional, Tuple

from .engine import ADDED, REMOVED, marked_lines
from .errors import ReportUnwritable
from .models import DEFAULT_OPTIONS, DiffResult, LineSet, Options
from .utils import ENCODING, ERRORS


class HTMLVisualizer:
    """
    Generates a side-by-side HTML report of removed and added lines with Dark Mode support.
    """

    HEAD_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>linediff: {title}</title>
    <style>
        :root {{
            --bg-color: #f6f8fa;
            --container-bg: #ffffff;
            --text-color: #24292f;
            --border-color: #d0d7de;
            --muted-text: #6e7781;
            --added-bg: #e6ffec;
            --deleted-bg: #ffebe9;
            --empty-bg: #f6f8fa;
        }}

        [data-theme="dark"] {{
            --bg-color: #0d1117;
            --container-bg: #161b22;
            --text-color: #c9d1d9;
            --border-color: #30363d;
            --muted-text: #8b949e;
            --added-bg: rgba(46, 160, 67, 0.15);
            --deleted-bg: rgba(248, 81, 73, 0.15);
            --empty-bg: #0d1117;
        }}

        body {{ font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Helvetica, Arial, sans-serif; background-color: var(--bg-color); color: var(--text-color); margin: 0; padding: 20px; }}
        .container {{ max-width: 1200px; margin: 0 auto 20px; background: var(--container-bg); border: 1px solid var(--border-color); border-radius: 6px; overflow: hidden; }}
        .header {{ padding: 16px; border-bottom: 1px solid var(--border-color); display: flex; justify-content: space-between; align-items: center; }}
        h2 {{ margin: 0; font-size: 16px; font-weight: 600; }}
        h3 {{ margin: 0; padding: 10px 16px; font-size: 13px; border-bottom: 1px solid var(--border-color); }}
        .toggle-btn {{ background: none; border: 1px solid var(--border-color); color: var(--text-color); padding: 5px 12px; border-radius: 6px; cursor: pointer; font-size: 12px; }}
        table {{ width: 100%; border-collapse: collapse; table-layout: fixed; font-size: 12px; font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace; }}
        th {{ text-align: left; padding: 6px 10px; color: var(--muted-text); border-bottom: 1px solid var(--border-color); }}
        td {{ padding: 0 10px; line-height: 20px; white-space: pre-wrap; word-break: break-all; vertical-align: top; }}
        .row-deleted {{ background-color: var(--deleted-bg); }}
        .row-added {{ background-color: var(--added-bg); }}
        .empty {{ background-color: var(--empty-bg); }}
        .legend {{ font-size: 12px; margin-top: 5px; color: var(--muted-text); }}
        .badge {{ display: inline-block; width: 10px; height: 10px; margin-right: 5px; border-radius: 2px; }}
        pre {{ margin: 0; padding: 10px 16px; font-size: 12px; }}
    </style>
    <script>
        function toggleTheme() {{
            const root = document.documentElement;
            const next = root.getAttribute('data-theme') === 'dark' ? 'light' : 'dark';
            root.setAttribute('data-theme', next);
            localStorage.setItem('linediff-theme', next);
        }}
        document.documentElement.setAttribute('data-theme', localStorage.getItem('linediff-theme') || 'light');
    </script>
</head>
<body>
"""

    FOOT_TEMPLATE = """<p style="text-align:center; color: #666; font-size: 12px;">Generated by linediff</p>
</body>
</html>
"""

    def render(self, result: DiffResult, options: Options = DEFAULT_OPTIONS) -> str:
        """
        Builds the report page.

        Args:
            result (DiffResult): The diff to show.
            options (Options): Which categories to show, whether to merge them
                into one column and whether to list both normalized sets.

        Returns:
            str: The complete HTML document.
        """
        title = f"{result.old.label} vs {result.new.label}"
        parts = [self.HEAD_TEMPLATE.format(title=html.escape(title))]
        parts.append(self._diff_table(result, options))
        if options.print_sorted:
            parts.append(self._sorted_block(result.old))
            parts.append(self._sorted_block(result.new))
        parts.append(self.FOOT_TEMPLATE)
        return "".join(parts)

    def generate(self, result: DiffResult, output_path: str = "linediff_report.html",
                 options: Options = DEFAULT_OPTIONS) -> None:
        content = self.render(result, options)
        try:
            with open(output_path, "w", encoding=ENCODING, errors=ERRORS) as f:
                f.write(content)
        except OSError as e:
            raise ReportUnwritable(output_path, e.strerror or str(e)) from e

    def _columns(self, result: DiffResult, options: Options) -> List[Tuple[str, List[Tuple[str, str]]]]:
        entries = marked_lines(result, options)
        if options.interleave:
            return [("Changes", entries)]
        columns = []
        if options.show_removed:
            columns.append(("Removed", [e for e in entries if e[0] == REMOVED]))
        if options.show_added:
            columns.append(("Added", [e for e in entries if e[0] == ADDED]))
        return columns

    def _diff_table(self, result: DiffResult, options: Options) -> str:
        columns = self._columns(result, options)
        rows = []
        for cells in zip_longest(*(entries for _, entries in columns)):
            rows.append("<tr>" + "".join(self._cell(entry) for entry in cells) + "</tr>")
        if not rows:
            rows.append(f'<tr><td colspan="{len(columns)}" class="empty">No differences</td></tr>')
        body = "".join(rows)
        heading = "".join(f"<th>{name}</th>" for name, _ in columns)

        legend = []
        if options.show_removed:
            legend.append(f'<span class="badge" style="background:#f85149"></span>Removed ({len(result.removed)})')
        if options.show_added:
            legend.append(f'<span class="badge" style="background:#2ea043; margin-left: 10px;"></span>Added ({len(result.added)})')
        badges = "\n                ".join(legend)

        return f"""<div class="container">
    <div class="header">
        <div>
            <h2>{html.escape(result.old.label)} &rarr; {html.escape(result.new.label)}</h2>
            <div class="legend">
                {badges}
            </div>
        </div>
        <button class="toggle-btn" onclick="toggleTheme()">Toggle Theme</button>
    </div>
    <table>
        <tr>{heading}</tr>
        {body}
    </table>
</div>
"""

    def _cell(self, entry: Optional[Tuple[str, str]]) -> str:
        if entry is None:
            return '<td class="empty"></td>'
        marker, line = entry
        row_class = "row-added" if marker == ADDED else "row-deleted"
        return f'<td class="{row_class}">{marker}{html.escape(line)}</td>'

    def _sorted_block(self, line_set: LineSet) -> str:
        body = "\n".join(html.escape(line) for line in line_set)
        return f"""<div class="container">
    <h3>sorted: {html.escape(line_set.label)} ({len(line_set)} lines)</h3>
    <pre>{body}</pre>
</div>
"""
