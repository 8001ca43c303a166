import html
import logging
import os
from typing import List
from .models import Classification, Segment

logger = logging.getLogger(__name__)


class HTMLVisualizer:
    """
    Generates a self-contained HTML report of a word diff with Dark Mode support.
    """

    HEAD_TEMPLATE = """
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>{title}</title>
        <style>
            :root {{
                --bg-color: #f6f8fa;
                --container-bg: #ffffff;
                --text-color: #24292f;
                --border-color: #d0d7de;

                /* Status Colors (Light) */
                --added-bg: #e6ffec; --added-mark: #2ea043;
                --deleted-bg: #ffebe9; --deleted-mark: #f85149;
            }}

            [data-theme="dark"] {{
                --bg-color: #0d1117;
                --container-bg: #161b22;
                --text-color: #c9d1d9;
                --border-color: #30363d;

                /* Status Colors (Dark) */
                --added-bg: rgba(46, 160, 67, 0.15); --added-mark: rgba(46, 160, 67, 0.6);
                --deleted-bg: rgba(248, 81, 73, 0.15); --deleted-mark: rgba(248, 81, 73, 0.6);
            }}

            body {{ font-family: Georgia, "Times New Roman", serif; background-color: var(--bg-color); color: var(--text-color); margin: 0; padding: 24px; }}
            main {{ max-width: 720px; margin: 0 auto; background: var(--container-bg); border: 1px solid var(--border-color); border-radius: 6px; }}

            header {{ padding: 12px 20px; border-bottom: 1px solid var(--border-color); font-size: 13px; }}
            header h1 {{ display: inline; margin: 0 12px 0 0; font-size: 15px; }}
            header button {{ float: right; background: none; border: 1px solid var(--border-color); color: inherit; border-radius: 4px; cursor: pointer; }}
            .count-added {{ color: var(--added-mark); margin-right: 8px; }}
            .count-deleted {{ color: var(--deleted-mark); }}

            /* Poem body */
            .poem {{ padding: 20px; white-space: pre-wrap; line-height: 1.6; font-size: 15px; }}

            /* Status Classes */
            .seg-added {{ background-color: var(--added-bg); border-bottom: 2px solid var(--added-mark); }}
            .seg-deleted {{ background-color: var(--deleted-bg); text-decoration: line-through; text-decoration-color: var(--deleted-mark); }}
        </style>
        <script>
            function toggleTheme() {{
                const root = document.documentElement;
                const next = root.dataset.theme === 'dark' ? 'light' : 'dark';
                root.dataset.theme = next;
                localStorage.setItem('poemdiff-theme', next);
            }}
            document.documentElement.dataset.theme = localStorage.getItem('poemdiff-theme') || 'light';
        </script>
    </head>
    <body>
        <main>
            <header>
                <h1>{title}</h1>
                <span class="count-added">+{added} words</span>
                <span class="count-deleted">-{deleted} words</span>
                <button onclick="toggleTheme()">Theme</button>
            </header>
            <div class="poem">"""

    FOOT_TEMPLATE = """</div>
        </main>
    </body>
    </html>
    """

    def render(self, segments: List[Segment], show_additions: bool = True,
               show_deletions: bool = True, title: str = "Poem Revision Diff") -> str:
        """
        Builds the HTML document for the given segments.

        Args:
            segments (List[Segment]): Output of calculate_diff.
            show_additions (bool): Highlight added text; plain text otherwise.
            show_deletions (bool): Highlight deleted text; plain text otherwise.
            title (str): Page and header title.

        Returns:
            str: The full HTML document.
        """
        added = sum(s.word_count for s in segments if s.classification is Classification.ADDED)
        deleted = sum(s.word_count for s in segments if s.classification is Classification.DELETED)

        body = []
        for segment in segments:
            text = html.escape(segment.text)
            if segment.classification is Classification.ADDED and show_additions:
                body.append(f'<span class="seg-added">{text}</span>')
            elif segment.classification is Classification.DELETED and show_deletions:
                body.append(f'<span class="seg-deleted">{text}</span>')
            else:
                body.append(text)

        head = self.HEAD_TEMPLATE.format(title=html.escape(title), added=added, deleted=deleted)
        return head + "".join(body) + self.FOOT_TEMPLATE

    def generate(self, segments: List[Segment], output_path: str = "poemdiff_report.html", **options) -> str:
        """Writes the report to output_path and returns its absolute path."""
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.render(segments, **options))
        path = os.path.abspath(output_path)
        logger.info("Report generated at %s", path)
        return path


class TerminalRenderer:
    """
    Renders a word diff for the console.
    """

    # ANSI Color Codes
    GREEN = '\033[92m'
    FAIL = '\033[91m'    # Red
    STRIKE = '\033[9m'
    ENDC = '\033[0m'

    MARKERS = {
        Classification.ADDED: ("{+", "+}"),
        Classification.DELETED: ("[-", "-]"),
    }

    def render(self, segments: List[Segment], show_additions: bool = True,
               show_deletions: bool = True, color: bool = True) -> str:
        out = []
        for segment in segments:
            kind = segment.classification
            visible = ((kind is Classification.ADDED and show_additions)
                       or (kind is Classification.DELETED and show_deletions))
            if not visible:
                out.append(segment.text)
            elif color:
                style = self.GREEN if kind is Classification.ADDED else self.FAIL + self.STRIKE
                out.append(f"{style}{segment.text}{self.ENDC}")
            else:
                opening, closing = self.MARKERS[kind]
                out.append(f"{opening}{segment.text}{closing}")
        return "".join(out)
